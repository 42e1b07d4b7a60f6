import jinja2

def get_jinja_message(ex):
	match ex:
		case jinja2.TemplateNotFound() | jinja2.TemplatesNotFound():
			return f"[{type(ex).__name__}] {', '.join(ex.templates)}"
		case jinja2.TemplateSyntaxError():
			return f"[{type(ex).__name__}]\n- Location {ex.filename}:\n- -  ({ex})"
		case default:
			return f"[{type(ex).__name__}] {ex}"

class WebAppGenError(Exception):
	""" Base class for every error that aborts a generation run. """

	def __init__(self, message):
		super().__init__(message)
		self.__message = message

	@property
	def message(self):
		return self.__message

class MalformedTemplate(WebAppGenError):
	""" The document does not hold exactly one of the anchor tags mutations rely on. """

	def __init__(self, anchor, count):
		super().__init__(f"Expected exactly one '{anchor}' in the document, found {count}")
		self.__anchor = anchor
		self.__count = count

	@property
	def anchor(self):
		return self.__anchor

	@property
	def count(self):
		return self.__count

class InvalidRequest(WebAppGenError):
	""" A script injection request that cannot produce a build block. """

class UpstreamCollectionFailure(WebAppGenError):
	""" The feature flags could not be collected from the user. """

	def __init__(self, prompt, parent=None):
		if parent is None:
			super().__init__(f"No answer received for prompt '{prompt}'")
		else:
			super().__init__(f"No answer received for prompt '{prompt}': [{type(parent).__name__}]")
		self.__prompt = prompt
		self.__parent = parent

	@property
	def prompt(self):
		return self.__prompt

	@property
	def parent(self):
		return self.__parent

class TemplateNotFound(WebAppGenError):
	def __init__(self, template, parent=None):
		super().__init__(f"Template not found: {template}")
		self.__template = template
		self.__parent = parent

	@property
	def template(self):
		return self.__template

	@property
	def parent(self):
		return self.__parent

class WriteFailure(WebAppGenError):
	def __init__(self, path, parent):
		super().__init__(f"Could not write {path}: [{type(parent).__name__}] {parent}")
		self.__path = path
		self.__parent = parent

	@property
	def path(self):
		return self.__path

	@property
	def parent(self):
		return self.__parent

__all__ = [
	"get_jinja_message",
	"WebAppGenError",
	"MalformedTemplate",
	"InvalidRequest",
	"UpstreamCollectionFailure",
	"TemplateNotFound",
	"WriteFailure",
]
