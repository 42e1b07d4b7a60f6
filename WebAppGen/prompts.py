import dataclasses
import re

from termcolor import colored

from .config import FeatureFlags
from .exceptions import UpstreamCollectionFailure

YES = re.compile(r"y", re.IGNORECASE)

@dataclasses.dataclass(frozen=True)
class Prompt:
	name: str
	message: str
	default: str = "Y/n"
	warning: str = ""

	def ask(self, input_fn):
		try:
			answer = input_fn(f"{colored('[?]', 'green')} {self.message} ({self.default}) ")
		except (EOFError, KeyboardInterrupt, OSError) as ex:
			raise UpstreamCollectionFailure(self.name, ex) from ex

		return parse_answer(answer, self.default)

PROMPTS = (
	Prompt(
		"compass_bootstrap",
		"Would you like to include Twitter Bootstrap for Sass?",
		warning="Yes: All Twitter Bootstrap files will be placed into the styles directory."),
	Prompt(
		"include_requirehm",
		"Would you like to support writing ECMAScript 6 modules? (requires RequireJS)",
		warning="Yes: RequireHM will be placed into the JavaScript vendor directory."),
	Prompt(
		"include_requirejs",
		"Would you like to include RequireJS (for AMD support)?",
		warning="Yes: RequireJS will be placed into the JavaScript vendor directory."),
)

def parse_answer(answer, default="Y/n"):
	""" Anything containing a 'y' is a yes, an empty answer takes the default. """
	if answer is None or answer.strip() == "":
		answer = default

	return YES.search(answer) is not None

def welcome():
	return "".join([
		"\n     _-----_",
		"\n    |       |",
		"\n    |", colored("--(o)--", "red"), "|   .--------------------------.",
		"\n   `---------´  |    ", colored("Welcome to WebAppGen,", "yellow", attrs=["bold"]), "  |",
		"\n    ", colored("( ", "yellow"), "_", colored("´U`", "yellow"), "_", colored(" )", "yellow"),
		"   |   ", colored("ladies and gentlemen!", "yellow", attrs=["bold"]), "  |",
		"\n    /___A___\\   '__________________________'",
		"\n     ", colored("|  ~  |", "yellow"),
		"\n   __", colored("'.___.'", "yellow"), "__",
		"\n ´   ", colored("`  |", "red"), "° ", colored("´ Y", "red"), " `\n",
	])

def collect(preset=None, input_fn=input, logger=None, show_welcome=True) -> FeatureFlags:
	"""
	Builds the feature flags, asking only for the ones missing from `preset`. A preset value of None counts
	as missing.
	"""
	answers = {key: value for key, value in (preset or {}).items() if value is not None}
	pending = [prompt for prompt in PROMPTS if prompt.name not in answers]

	if logger is not None and show_welcome and len(pending) > 0:
		logger.raw(welcome())
		logger.normal("Out of the box I include HTML5 Boilerplate, jQuery and Modernizr.")

	for prompt in pending:
		answers[prompt.name] = prompt.ask(input_fn)

		if answers[prompt.name] and logger is not None:
			logger.normal(f"- {prompt.warning}", "white")

	return FeatureFlags.from_answers(answers)
