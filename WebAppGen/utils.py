import re

from markupsafe import Markup
from markupsafe import escape

from .exceptions import MalformedTemplate

INDENT = "    "

def locate(document: str, anchor: str) -> int:
	""" Returns the position of an anchor that must occur exactly once in the document. """
	count = document.count(anchor)
	if count != 1:
		raise MalformedTemplate(anchor, count)

	return document.index(anchor)

def script(path: str, attributes=None) -> str:
	attrs = "".join(f' {key}="{escape(value)}"' for key, value in dict(attributes or {}).items())
	return Markup(f'<script{attrs} src="{escape(path)}"></script>')

def build_block(bundle: str, sources, attributes=None, indent="") -> str:
	"""
	Wraps the script references in the usemin markers, so the build concatenates `sources` into `bundle`.
	Attributes only go on the first script.
	"""
	lines = [f"<!-- build:js {bundle} -->"]

	for i, src in enumerate(sources):
		lines.append(str(script(src, attributes if i == 0 else None)))

	lines.append("<!-- endbuild -->")

	return "\n".join(f"{indent}{line}" for line in lines)

def slugify(name: str, default="webapp") -> str:
	slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
	return slug or default
