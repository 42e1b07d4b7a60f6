from WebAppGen.logging import Logger

def test_quiet_suppresses_everything_but_errors(capsys):
	logger = Logger(quiet=True)
	logger.normal("normal")
	logger.raw("raw")
	logger.action("create", "app/index.html")
	logger.warning("careful")
	logger.error("broken")

	out = capsys.readouterr().out
	assert "normal" not in out
	assert "raw" not in out
	assert "app/index.html" not in out
	assert "careful" not in out
	assert "broken" in out

def test_loud_logger_prints_warnings(capsys):
	Logger().warning("careful")

	assert "careful" in capsys.readouterr().out
