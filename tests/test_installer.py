import subprocess

from WebAppGen import installer

def test_missing_executable(tmp_path, quiet_logger, monkeypatch):
	monkeypatch.setattr(installer.shutil, "which", lambda name: None)

	assert installer.install(tmp_path, quiet_logger) is False

def test_failed_install_is_swallowed(tmp_path, quiet_logger, monkeypatch):
	def fail(*args, **kwds):
		raise subprocess.CalledProcessError(1, args[0])

	monkeypatch.setattr(installer.shutil, "which", lambda name: "/usr/bin/bower")
	monkeypatch.setattr(installer.subprocess, "run", fail)

	assert installer.install(tmp_path, quiet_logger) is False

def test_install_in_project_root(tmp_path, quiet_logger, monkeypatch):
	calls = []

	def record(command, cwd=None, check=False):
		calls.append((command, cwd, check))

	monkeypatch.setattr(installer.shutil, "which", lambda name: "/usr/bin/bower")
	monkeypatch.setattr(installer.subprocess, "run", record)

	assert installer.install(tmp_path, quiet_logger) is True
	assert calls == [(["/usr/bin/bower", "install"], tmp_path, True)]

def test_done_message():
	assert "npm install & bower install" in installer.done_message(True)
	assert "npm install" in installer.done_message(False)
