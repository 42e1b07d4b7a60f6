from bs4 import BeautifulSoup

from WebAppGen import FeatureFlags
from WebAppGen.composer import compose
from WebAppGen.composer import installed_items

def list_items(fragment):
	return [li.get_text() for li in BeautifulSoup(fragment, "html.parser").find_all("li")]

def test_defaults_only_when_flags_disabled(no_flags):
	assert installed_items(no_flags, ["Item A", "Item B"]) == ["Item A", "Item B"]
	assert list_items(compose(no_flags, ["Item A", "Item B"])) == ["Item A", "Item B"]

def test_fixed_order_when_all_enabled():
	flags = FeatureFlags(include_requirehm=True, include_requirejs=True, compass_bootstrap=True)

	assert installed_items(flags, ["Item A"]) == [
		"Item A",
		"Twitter Bootstrap",
		"RequireJS",
		"Support for ES6 Modules",
	]

def test_single_flag():
	flags = FeatureFlags(compass_bootstrap=False, include_requirejs=False, include_requirehm=True)

	assert installed_items(flags, ["Item A"]) == ["Item A", "Support for ES6 Modules"]

def test_defaults_are_not_mutated(all_flags):
	defaults = ["Item A"]
	installed_items(all_flags, defaults)

	assert defaults == ["Item A"]

def test_rendered_fragment(no_flags):
	content = compose(no_flags, ["Item A"])

	assert "<li>Item A</li>" in content
	assert content.count("<li>") == 1
	assert "<h1>'Allo, 'Allo!</h1>" in content
	assert "<p>installed.</p>" in content
	assert content.endswith("</div>\n")

def test_items_are_escaped(no_flags):
	content = compose(no_flags, ["<b>Bold</b>"])

	assert "<li>&lt;b&gt;Bold&lt;/b&gt;</li>" in content

def test_compose_is_deterministic(all_flags):
	assert compose(all_flags, ["Item A"]) == compose(all_flags, ["Item A"])
