import pathlib
import jinja2

from .exceptions import TemplateNotFound

def template_path():
	return pathlib.Path(__file__).parent/"templates"

class TemplateLoader(jinja2.FileSystemLoader):
	""" Loads the files shipped with the generator, either as jinja templates or verbatim. """

	def __init__(self, searchpath=None, encoding="utf-8", followlinks=False):
		if searchpath is None:
			searchpath = [template_path()]

		super().__init__(searchpath, encoding=encoding, followlinks=followlinks)

	def get_source(self, env, template: str):
		try:
			return super().get_source(env, template)
		except jinja2.exceptions.TemplateNotFound as ex:
			raise TemplateNotFound(template, ex)

	def find(self, template: str) -> pathlib.Path:
		for root in self.searchpath:
			path = pathlib.Path(root)/template
			if path.is_file():
				return path

		raise TemplateNotFound(template)

	def read_text(self, template: str) -> str:
		source, _, _ = self.get_source(None, template)
		return source

	def read_bytes(self, template: str) -> bytes:
		return self.find(template).read_bytes()
