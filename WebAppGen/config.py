import dataclasses

APP_DIR = "app"
TEST_DIR = "test"

DIRECTORIES = (
	"app",
	"app/scripts",
	"app/styles",
	"app/images",
	"test",
	"test/spec",
)

DEFAULT_TEST_FRAMEWORK = "mocha"

@dataclasses.dataclass(frozen=True)
class FeatureFlags:
	""" Answers to the generator prompts. Fixed once collected. """
	compass_bootstrap: bool = True
	include_requirejs: bool = True
	include_requirehm: bool = True

	@classmethod
	def from_answers(cls, answers):
		return cls(**{field.name: bool(answers[field.name]) for field in dataclasses.fields(cls)})

@dataclasses.dataclass(frozen=True)
class GeneratorOptions:
	test_framework: str = DEFAULT_TEST_FRAMEWORK
	skip_install: bool = False
	force: bool = False
	skip_welcome: bool = False
