import dataclasses
import re

from . import utils
from .exceptions import InvalidRequest

BODY_CLOSE = "</body>"

# Text that would end the build marker comment or add a second closing tag.
FORBIDDEN_IN_BUNDLE = (BODY_CLOSE, "-->", "\n", "\r")
ATTRIBUTE_NAME = re.compile(r"^[A-Za-z_:][A-Za-z0-9_.:-]*$")

@dataclasses.dataclass(frozen=True)
class ScriptRequest:
	bundle: str
	sources: tuple[str, ...]
	attributes: tuple[tuple[str, str], ...] = ()

	def __post_init__(self):
		if isinstance(self.sources, str):
			raise InvalidRequest(f"Source scripts for bundle {self.bundle} must be a sequence of paths, not a string")

		attributes = self.attributes or ()
		if isinstance(attributes, dict):
			attributes = attributes.items()

		object.__setattr__(self, "sources", tuple(self.sources))
		object.__setattr__(self, "attributes", tuple((key, value) for key, value in attributes))

		if not isinstance(self.bundle, str) or not self.bundle:
			raise InvalidRequest("A script block needs a bundle name")

		for text in FORBIDDEN_IN_BUNDLE:
			if text in self.bundle:
				raise InvalidRequest(f"Bundle name may not contain {text!r}: {self.bundle!r}")

		if len(self.sources) == 0:
			raise InvalidRequest(f"No source scripts given for bundle {self.bundle}")

		if len(set(self.sources)) != len(self.sources):
			raise InvalidRequest(f"Duplicate source scripts given for bundle {self.bundle}")

		for key, value in self.attributes:
			if not isinstance(key, str) or not isinstance(value, str):
				raise InvalidRequest(f"Script attributes must map strings to strings: {key!r}={value!r}")

			if not ATTRIBUTE_NAME.match(key):
				raise InvalidRequest(f"Invalid script attribute name: {key!r}")

def apply(document: str, request: ScriptRequest) -> str:
	index = utils.locate(document, BODY_CLOSE)
	line_start = document.rfind("\n", 0, index) + 1
	prefix = document[line_start:index]

	# </body> on its own line: the block goes on the lines above it, one level deeper.
	if prefix.strip() == "":
		block = utils.build_block(request.bundle, request.sources, request.attributes, prefix + utils.INDENT)
		return f"{document[:line_start]}{block}\n{document[line_start:]}"

	block = utils.build_block(request.bundle, request.sources, request.attributes)
	return f"{document[:index]}{block}\n{document[index:]}"

def inject(document: str, bundle: str, sources, attributes=None) -> str:
	"""
	Returns a copy of `document` with a build block for `bundle` placed right before `</body>`.

	Later calls land nearer to `</body>` than earlier ones.
	"""
	return apply(document, ScriptRequest(bundle, sources, attributes))
