import shutil
import subprocess

from termcolor import colored

BOWER_INSTALL = ("bower", "install")

def done_message(skipped):
	if skipped:
		return f"\nI'm all done. Just run {colored('npm install & bower install', 'yellow', attrs=['bold'])} to install the required dependencies."

	return f"\nI'm all done. Just run {colored('npm install', 'yellow', attrs=['bold'])} to install the required Node.js dependencies."

def install(root, logger, command=BOWER_INSTALL):
	"""
	Installs the front-end components of the generated project. Failures are reported and swallowed, the
	files are already in place at this point.
	"""
	executable = shutil.which(command[0])

	if executable is None:
		logger.error(f"[Install] {command[0]} was not found on the PATH, skipping dependency installation")
		return False

	logger.action("invoke", " ".join(command))

	try:
		subprocess.run([executable, *command[1:]], cwd=root, check=True)
	except (subprocess.CalledProcessError, OSError) as ex:
		logger.error(f"[Install] {' '.join(command)} failed: [{type(ex).__name__}] {ex}")
		return False

	logger.normal(done_message(False), "white")
	return True
