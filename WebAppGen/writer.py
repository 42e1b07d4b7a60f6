import pathlib

from .exceptions import WriteFailure
from .logging import DEFAULT as default_logger

class FileWriter:
	"""
	Writes the generated files below the project root.

	A file that already exists is left alone unless its content is unchanged (reported as identical) or the
	writer was created with `force`.
	"""

	def __init__(self, root, force=False, logger=None):
		self.__root = pathlib.Path(root)
		self.__force = force
		self.__logger = default_logger if logger is None else logger
		self.__written = []

	@property
	def root(self):
		return self.__root

	@property
	def written(self):
		return list(self.__written)

	def path(self, relpath):
		return self.__root/relpath

	def mkdir(self, relpath):
		path = self.path(relpath)

		try:
			path.mkdir(parents=True, exist_ok=True)
		except OSError as ex:
			raise WriteFailure(relpath, ex)

	def write(self, relpath, content):
		path = self.path(relpath)
		data = content if isinstance(content, bytes) else content.encode("utf-8")

		try:
			if path.is_file():
				if path.read_bytes() == data:
					self.__logger.action("identical", relpath)
					return "identical"

				if not self.__force:
					self.__logger.action("skip", relpath)
					self.__logger.warning(f"- {relpath} already exists, use --force to overwrite it")
					return "skip"

				status = "force"
			else:
				status = "create"

			path.parent.mkdir(parents=True, exist_ok=True)
			path.write_bytes(data)
		except OSError as ex:
			raise WriteFailure(relpath, ex)

		self.__logger.action(status, relpath)
		self.__written.append(relpath)
		return status

	def copy(self, env, template, relpath):
		""" Copies a packaged file byte for byte. """
		return self.write(relpath, env.read_bytes(template))
