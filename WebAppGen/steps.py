"""
The generation pipeline. Every step is a named action guarded by a predicate over the run context, and
the steps run in the order they are declared in STEPS.
"""

import dataclasses
import pathlib
import typing

from . import assembler
from . import installer
from . import manifests
from .config import DIRECTORIES
from .config import FeatureFlags
from .config import GeneratorOptions

INDEX_TEMPLATE = "index.html"
BOOTSTRAP_IMPORT = "@import 'sass-bootstrap/lib/bootstrap'\n"

@dataclasses.dataclass(frozen=True)
class Context:
	root: pathlib.Path
	name: str
	flags: FeatureFlags
	options: GeneratorOptions
	writer: typing.Any
	env: typing.Any
	logger: typing.Any

@dataclasses.dataclass(frozen=True)
class Step:
	name: str
	action: typing.Callable[[Context], None]
	when: typing.Callable[[Context], bool] = lambda ctx: True

def flag(name):
	return lambda ctx: getattr(ctx.flags, name)

def not_flag(name):
	return lambda ctx: not getattr(ctx.flags, name)

def gruntfile(ctx):
	ctx.writer.write("Gruntfile.js", manifests.gruntfile(ctx.env, ctx.flags, ctx.options))

def package_json(ctx):
	ctx.writer.write("package.json", manifests.package_json(ctx.name, ctx.flags, ctx.options))

def git(ctx):
	ctx.writer.copy(ctx.env, "gitignore", ".gitignore")
	ctx.writer.copy(ctx.env, "gitattributes", ".gitattributes")

def bower(ctx):
	ctx.writer.write(".bowerrc", manifests.bowerrc())
	ctx.writer.write("component.json", manifests.component_json(ctx.name, ctx.flags))

def jshint(ctx):
	ctx.writer.write(".jshintrc", manifests.jshintrc())

def editor_config(ctx):
	ctx.writer.copy(ctx.env, "editorconfig", ".editorconfig")

def h5bp(ctx):
	ctx.writer.copy(ctx.env, "favicon.ico", "app/favicon.ico")
	ctx.writer.copy(ctx.env, "404.html", "app/404.html")
	ctx.writer.copy(ctx.env, "robots.txt", "app/robots.txt")

def sass_stylesheet(ctx):
	ctx.writer.write("app/styles/main.scss", BOOTSTRAP_IMPORT)

def css_stylesheet(ctx):
	ctx.writer.write("app/styles/main.css", "")

def directories(ctx):
	for directory in DIRECTORIES:
		ctx.writer.mkdir(directory)

def index(ctx):
	# Assembly finishes before anything touches the disk.
	document = assembler.assemble(ctx.env.read(INDEX_TEMPLATE), ctx.flags, env=ctx.env)
	ctx.writer.write("app/index.html", document)

def amd_module(ctx):
	ctx.writer.copy(ctx.env, "app.js", "app/scripts/app.js")

def main_script(ctx):
	if ctx.flags.include_requirejs:
		ctx.writer.copy(ctx.env, "main.js", "app/scripts/main.js")
	else:
		ctx.writer.write("app/scripts/main.js", "")

def install(ctx):
	installer.install(ctx.root, ctx.logger)

def install_hint(ctx):
	ctx.logger.normal(installer.done_message(True), "white")

STEPS = (
	Step("gruntfile", gruntfile),
	Step("package_json", package_json),
	Step("git", git),
	Step("bower", bower),
	Step("jshint", jshint),
	Step("editor_config", editor_config),
	Step("h5bp", h5bp),
	Step("sass_stylesheet", sass_stylesheet, flag("compass_bootstrap")),
	Step("css_stylesheet", css_stylesheet, not_flag("compass_bootstrap")),
	Step("directories", directories),
	Step("index", index),
	Step("amd_module", amd_module, flag("include_requirejs")),
	Step("main_script", main_script),
	Step("install", install, lambda ctx: not ctx.options.skip_install),
	Step("install_hint", install_hint, lambda ctx: ctx.options.skip_install),
)
