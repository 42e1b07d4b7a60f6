import pytest

from WebAppGen import InvalidRequest
from WebAppGen import MalformedTemplate
from WebAppGen.injector import inject
from WebAppGen.injector import ScriptRequest

TEMPLATE = "<html><body></body></html>"

def test_inject_inline_body():
	result = inject(TEMPLATE, "scripts/b1.js", ["a.js", "b.js"])

	assert result == (
		"<html><body><!-- build:js scripts/b1.js -->\n"
		'<script src="a.js"></script>\n'
		'<script src="b.js"></script>\n'
		"<!-- endbuild -->\n"
		"</body></html>")

def test_inject_keeps_single_closing_tag():
	result = inject(TEMPLATE, "scripts/b1.js", ["a.js"])

	assert result.count("</body>") == 1
	assert result.index("<!-- endbuild -->") < result.index("</body>")

def test_inject_indents_block_above_closing_line():
	template = "<body>\n    </body>\n"
	result = inject(template, "x.js", ["a.js"])

	assert result == (
		"<body>\n"
		"        <!-- build:js x.js -->\n"
		'        <script src="a.js"></script>\n'
		"        <!-- endbuild -->\n"
		"    </body>\n")

def test_inject_calls_stack_towards_closing_tag():
	result = inject(TEMPLATE, "B1", ["one.js", "two.js"])
	result = inject(result, "B2", ["three.js"])

	b1_start = result.index("<!-- build:js B1 -->")
	b2_start = result.index("<!-- build:js B2 -->")
	b1_end = result.index("<!-- endbuild -->")
	b2_end = result.rindex("<!-- endbuild -->")

	assert b1_start < b1_end < b2_start < b2_end < result.index("</body>")
	assert "three.js" not in result[b1_start:b1_end]
	assert "one.js" not in result[b2_start:b2_end]
	assert result.count("</body>") == 1

def test_attributes_only_on_first_script():
	result = inject(TEMPLATE, "scripts/amd-app.js", ["r.js", "s.js"], {"data-main": "scripts/main"})

	assert '<script data-main="scripts/main" src="r.js"></script>' in result
	assert '<script src="s.js"></script>' in result
	assert result.count("data-main") == 1

def test_attribute_values_are_escaped():
	result = inject(TEMPLATE, "x.js", ["a.js"], {"data-x": 'say "hi"'})

	assert 'data-x="say &#34;hi&#34;"' in result

def test_inject_is_pure():
	first = inject(TEMPLATE, "x.js", ["a.js", "b.js"])
	second = inject(TEMPLATE, "x.js", ["a.js", "b.js"])

	assert first == second

@pytest.mark.parametrize("template, count", [
	("<html><body></html>", 0),
	("<html><body></body></body></html>", 2),
])
def test_malformed_template(template, count):
	with pytest.raises(MalformedTemplate) as info:
		inject(template, "x.js", ["a.js"])

	assert info.value.anchor == "</body>"
	assert info.value.count == count

def test_empty_sources_rejected():
	with pytest.raises(InvalidRequest):
		inject(TEMPLATE, "x.js", [])

def test_empty_bundle_rejected():
	with pytest.raises(InvalidRequest):
		ScriptRequest("", ["a.js"])

def test_duplicate_sources_rejected():
	with pytest.raises(InvalidRequest):
		ScriptRequest("x.js", ["a.js", "a.js"])

def test_non_string_attribute_rejected():
	with pytest.raises(InvalidRequest):
		ScriptRequest("x.js", ["a.js"], {"defer": True})

def test_request_normalizes_sources():
	request = ScriptRequest("x.js", ["a.js", "b.js"])

	assert request.sources == ("a.js", "b.js")
	assert request.attributes == ()

@pytest.mark.parametrize("bundle", [
	"x</body>.js",
	"x-->.js",
	"scripts/a\nb.js",
	"scripts/a\rb.js",
])
def test_bundle_cannot_break_the_document(bundle):
	with pytest.raises(InvalidRequest):
		inject(TEMPLATE, bundle, ["a.js"])

def test_single_string_source_rejected():
	with pytest.raises(InvalidRequest) as info:
		inject(TEMPLATE, "x.js", "app.js")

	assert "Duplicate" not in info.value.message

def test_invalid_attribute_name_rejected():
	with pytest.raises(InvalidRequest):
		ScriptRequest("x.js", ["a.js"], {'data-x"><script': "y"})

def test_request_is_hashable():
	first = ScriptRequest("x.js", ["a.js"], {"data-main": "scripts/main"})
	second = ScriptRequest("x.js", ("a.js",), (("data-main", "scripts/main"),))

	assert first == second
	assert hash(first) == hash(second)
	assert first.attributes == (("data-main", "scripts/main"),)
