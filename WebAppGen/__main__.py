import argparse
import os
import pathlib
import sys
import traceback

import jinja2

import WebAppGen
from . import exceptions
from . import prompts
from .config import DEFAULT_TEST_FRAMEWORK
from .logging import DEFAULT as default_logger
from .logging import Logger

class App:
	def __init__(self, argv=None, input_fn=input):
		self.__parser = argparse.ArgumentParser(
			prog="WebAppGen",
			description="Scaffolds a front-end web application: HTML5 Boilerplate, jQuery, Modernizr and a Grunt build.")

		self.__add_arguments()
		self.__args = self.__parser.parse_args(argv)
		self.__directory = pathlib.Path(self.__args.project_dir)
		self.__input_fn = input_fn
		self.__logger = Logger(quiet=True) if self.__args.quiet else default_logger

	def __add_arguments(self):
		self.__parser.add_argument(
			"project_dir", type=str, nargs="?", default=os.getcwd())
		self.__parser.add_argument(
			"--bootstrap", dest="compass_bootstrap", action=argparse.BooleanOptionalAction, default=None,
			help="Include Twitter Bootstrap for Sass.")
		self.__parser.add_argument(
			"--requirehm", dest="include_requirehm", action=argparse.BooleanOptionalAction, default=None,
			help="Support writing ECMAScript 6 modules.")
		self.__parser.add_argument(
			"--requirejs", dest="include_requirejs", action=argparse.BooleanOptionalAction, default=None,
			help="Include RequireJS for AMD support.")
		self.__parser.add_argument(
			"--yes", "-y", action="store_true", help="Accept the default answer for every prompt.")
		self.__parser.add_argument(
			"--test-framework", default=DEFAULT_TEST_FRAMEWORK)
		self.__parser.add_argument(
			"--skip-install", action="store_true", help="Do not run bower install after generating.")
		self.__parser.add_argument(
			"--skip-welcome-message", action="store_true")
		self.__parser.add_argument(
			"--force", "-f", action="store_true", help="Overwrite files that already exist.")
		self.__parser.add_argument(
			"--quiet", "-q", action="store_true")

	@property
	def proj_dir(self):
		return self.__directory

	@property
	def args(self):
		return self.__args

	@property
	def logger(self):
		return self.__logger

	def preset(self):
		preset = {prompt.name: getattr(self.args, prompt.name) for prompt in prompts.PROMPTS}

		if self.args.yes:
			preset = {
				name: prompts.parse_answer(None) if value is None else value
				for name, value in preset.items()}

		return preset

	def options(self):
		return WebAppGen.GeneratorOptions(
			test_framework=self.args.test_framework,
			skip_install=self.args.skip_install,
			force=self.args.force,
			skip_welcome=self.args.skip_welcome_message)

	def run(self):
		options = self.options()
		flags = prompts.collect(
			self.preset(),
			input_fn=self.__input_fn,
			logger=self.logger,
			show_welcome=not options.skip_welcome)

		self.logger.normal(f"Generating web app in {self.proj_dir.absolute()}")
		WebAppGen.Generator(self.proj_dir, flags, options, logger=self.logger).run()
		self.logger.normal("[Finished]", "green")

def main(argv=None, input_fn=input):
	try:
		App(argv, input_fn).run()
	except jinja2.exceptions.TemplateError as ex:
		default_logger.error(exceptions.get_jinja_message(ex))
		return 1
	except exceptions.WebAppGenError as ex:
		default_logger.error(f"\n[Error] {type(ex).__name__}: {ex.message}")
		return 1
	except Exception as ex:
		traceback.print_exception(ex)
		default_logger.error(f"\n[Error] {type(ex).__name__}")
		return 1

	return 0

if __name__ == '__main__':
	sys.exit(main())
