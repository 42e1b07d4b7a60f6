import pathlib

import WebAppGen.logging as logging

from WebAppGen.assembler import assemble
from WebAppGen.assembler import AssemblyState
from WebAppGen.composer import compose
from WebAppGen.config import FeatureFlags
from WebAppGen.config import GeneratorOptions
from WebAppGen.environment import ScaffoldEnvironment
from WebAppGen.exceptions import *
from WebAppGen.injector import inject
from WebAppGen.injector import ScriptRequest
from WebAppGen.steps import Context
from WebAppGen.steps import Step
from WebAppGen.steps import STEPS
from WebAppGen.writer import FileWriter

class Generator:
	"""
	Runs the generation steps for one project directory.

	Nothing is kept between runs: every call to run() builds a fresh context from the flags and options the
	generator was created with.
	"""

	steps = STEPS

	def __init__(self, root, flags: FeatureFlags, options: GeneratorOptions | None = None, logger=None, env=None):
		self.__root = pathlib.Path(root).absolute()
		self.__flags = flags
		self.__options = GeneratorOptions() if options is None else options
		self.__logger = logging.DEFAULT if logger is None else logger
		self.__env = ScaffoldEnvironment() if env is None else env

	@property
	def root(self):
		return self.__root

	@property
	def flags(self):
		return self.__flags

	@property
	def options(self):
		return self.__options

	def context(self):
		return Context(
			root=self.__root,
			name=self.__root.name,
			flags=self.__flags,
			options=self.__options,
			writer=FileWriter(self.__root, force=self.__options.force, logger=self.__logger),
			env=self.__env,
			logger=self.__logger)

	def run(self):
		""" Runs the enabled steps in order and returns the context they wrote through. """
		ctx = self.context()

		for step in self.steps:
			if step.when(ctx):
				step.action(ctx)

		return ctx

def generate(root, flags: FeatureFlags, options: GeneratorOptions | None = None, **kwds):
	return Generator(root, flags, options, **kwds).run()

__all__ = [
	"Generator",
	"generate",
	"assemble",
	"AssemblyState",
	"compose",
	"inject",
	"ScriptRequest",
	"FeatureFlags",
	"GeneratorOptions",
	"FileWriter",
	"Step",
	"WebAppGenError",
	"MalformedTemplate",
	"InvalidRequest",
	"UpstreamCollectionFailure",
	"TemplateNotFound",
	"WriteFailure",
]
