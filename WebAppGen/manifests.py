"""
Build configuration and package manifests of the generated project. The Gruntfile goes through jinja, the
JSON manifests are plain dictionaries serialized with orjson so their key order stays stable.
"""

import orjson

from . import utils
from .config import FeatureFlags
from .config import GeneratorOptions

GRUNTFILE_TEMPLATE = "Gruntfile.js"
JSON_FLAGS = orjson.OPT_INDENT_2

DEV_DEPENDENCIES = {
	"grunt": "~0.4.1",
	"grunt-contrib-copy": "~0.4.1",
	"grunt-contrib-concat": "~0.1.3",
	"grunt-contrib-uglify": "~0.2.0",
	"grunt-contrib-jshint": "~0.4.1",
	"grunt-contrib-cssmin": "~0.6.0",
	"grunt-contrib-connect": "~0.2.0",
	"grunt-contrib-clean": "~0.4.0",
	"grunt-contrib-htmlmin": "~0.1.3",
	"grunt-contrib-imagemin": "~0.1.3",
	"grunt-contrib-watch": "~0.4.0",
	"grunt-usemin": "~0.1.10",
	"grunt-rev": "~0.1.0",
	"grunt-open": "~0.2.0",
	"grunt-concurrent": "~0.1.0",
	"connect-livereload": "~0.1.2",
	"matchdep": "~0.1.1",
}

def dumps(data) -> str:
	return orjson.dumps(data, option=JSON_FLAGS).decode("utf-8") + "\n"

def gruntfile(env, flags: FeatureFlags, options: GeneratorOptions) -> str:
	return env.render(GRUNTFILE_TEMPLATE, flags=flags, options=options)

def package_json(name: str, flags: FeatureFlags, options: GeneratorOptions) -> str:
	dev = dict(DEV_DEPENDENCIES)

	if flags.compass_bootstrap:
		dev["grunt-contrib-compass"] = "~0.2.0"

	if flags.include_requirejs:
		dev["grunt-contrib-requirejs"] = "~0.4.1"

	if options.test_framework == "mocha":
		dev["grunt-mocha"] = "~0.3.0"

	return dumps({
		"name": utils.slugify(name),
		"version": "0.0.0",
		"dependencies": {},
		"devDependencies": dev,
		"engines": {"node": ">=0.8.0"},
	})

def component_json(name: str, flags: FeatureFlags) -> str:
	dependencies = {
		"jquery": "~1.9.1",
		"modernizr": "~2.6.2",
	}

	if flags.compass_bootstrap:
		dependencies["sass-bootstrap"] = "~2.3.0"

	if flags.include_requirejs:
		dependencies["requirejs"] = "~2.1.5"

	if flags.include_requirehm:
		dependencies["requirejs-hm"] = "~0.2.1"

	return dumps({
		"name": utils.slugify(name),
		"version": "0.0.0",
		"dependencies": dependencies,
		"devDependencies": {},
	})

def bowerrc() -> str:
	return dumps({"directory": "app/components"})

def jshintrc() -> str:
	return dumps({
		"node": True,
		"browser": True,
		"esnext": True,
		"bitwise": True,
		"camelcase": True,
		"curly": True,
		"eqeqeq": True,
		"immed": True,
		"indent": 4,
		"latedef": True,
		"newcap": True,
		"noarg": True,
		"quotmark": "single",
		"regexp": True,
		"undef": True,
		"unused": True,
		"strict": True,
		"trailing": True,
		"smarttabs": True,
		"globals": {
			"jQuery": True,
		},
	})
