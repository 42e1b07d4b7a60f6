from .config import FeatureFlags
from .environment import default_environment

CONTENT_TEMPLATE = "content.html"

# Display names of the optional components, in the order they are listed.
OPTIONAL_ITEMS = (
	("compass_bootstrap", "Twitter Bootstrap"),
	("include_requirejs", "RequireJS"),
	("include_requirehm", "Support for ES6 Modules"),
)

def installed_items(flags: FeatureFlags, base_defaults) -> list[str]:
	items = list(base_defaults)

	for flag, display in OPTIONAL_ITEMS:
		if getattr(flags, flag):
			items.append(display)

	return items

def compose(flags: FeatureFlags, base_defaults, env=None) -> str:
	env = default_environment() if env is None else env
	return env.render(CONTENT_TEMPLATE, items=installed_items(flags, base_defaults))
