import functools
import jinja2

from .loader import TemplateLoader

class ScaffoldEnvironment(jinja2.Environment):
	""" Environment used to render the generated project's files. """

	def __init__(self, loader=None, **kwds):
		kwds.setdefault("autoescape", jinja2.select_autoescape(["html"]))
		kwds.setdefault("keep_trailing_newline", True)
		kwds.setdefault("undefined", jinja2.StrictUndefined)

		super().__init__(loader=TemplateLoader() if loader is None else loader, **kwds)

	def render(self, template, **context):
		return self.get_template(template).render(**context)

	def read(self, template):
		""" Returns the raw source of a template without rendering it. """
		return self.loader.read_text(template)

	def read_bytes(self, template):
		return self.loader.read_bytes(template)

@functools.lru_cache(maxsize=1)
def default_environment():
	return ScaffoldEnvironment()
