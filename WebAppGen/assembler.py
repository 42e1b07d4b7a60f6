import dataclasses
import enum
import typing

from . import composer
from . import injector
from . import utils
from .config import FeatureFlags

BODY_OPEN = "<body>"

DEFAULT_ITEMS = ("HTML5 Boilerplate",)

PLUGINS_BUNDLE = "scripts/plugins.js"
AMD_BUNDLE = "scripts/amd-app.js"
REQUIREJS_SOURCE = "scripts/vendor/require.js"
REQUIREJS_ATTRIBUTES = {"data-main": "scripts/main"}

# Transition comes before the plugins animating through it, tooltip before popover.
BOOTSTRAP_PLUGINS = tuple(
	f"components/sass-bootstrap/js/bootstrap-{name}.js"
	for name in (
		"affix",
		"alert",
		"dropdown",
		"tooltip",
		"modal",
		"transition",
		"button",
		"popover",
		"typeahead",
		"carousel",
		"scrollspy",
		"collapse",
		"tab",
	)
)

class AssemblyState(enum.Enum):
	TEMPLATE_LOADED = 0
	SCRIPTS_INJECTED = 1
	CONTENT_INJECTED = 2
	FINALIZED = 3

@dataclasses.dataclass(frozen=True)
class Stage:
	state: AssemblyState
	when: typing.Callable[[FeatureFlags], bool]
	apply: typing.Callable[[str, FeatureFlags, typing.Sequence[str], typing.Any], str]

def _inject_plugins(document, flags, base_defaults, env):
	return injector.inject(document, PLUGINS_BUNDLE, BOOTSTRAP_PLUGINS)

def _inject_content(document, flags, base_defaults, env):
	index = utils.locate(document, BODY_OPEN) + len(BODY_OPEN)
	content = composer.compose(flags, base_defaults, env)
	return f"{document[:index]}\n{content}{document[index:]}"

def _inject_amd(document, flags, base_defaults, env):
	return injector.inject(document, AMD_BUNDLE, [REQUIREJS_SOURCE], REQUIREJS_ATTRIBUTES)

STAGES = (
	Stage(AssemblyState.SCRIPTS_INJECTED, lambda flags: flags.compass_bootstrap, _inject_plugins),
	Stage(AssemblyState.CONTENT_INJECTED, lambda flags: True, _inject_content),
	Stage(AssemblyState.FINALIZED, lambda flags: flags.include_requirejs, _inject_amd),
)

def assemble(template: str, flags: FeatureFlags, base_defaults=DEFAULT_ITEMS, on_state=None, env=None) -> str:
	"""
	Builds the final index document from the template.

	Stages run in a fixed order, each one taking the previous document. A failing stage raises before
	anything is returned, so callers never see a partially assembled document. `on_state` is called with
	every state the assembly enters. `env` renders the content block, the default environment when None.
	"""
	document = template

	if on_state is not None:
		on_state(AssemblyState.TEMPLATE_LOADED)

	for stage in STAGES:
		if stage.when(flags):
			document = stage.apply(document, flags, base_defaults, env)

		if on_state is not None:
			on_state(stage.state)

	return document
