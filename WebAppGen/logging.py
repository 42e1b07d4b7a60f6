from termcolor import colored

ACTION_COLORS = {
	"create": "green",
	"identical": "cyan",
	"force": "yellow",
	"skip": "yellow",
	"invoke": "blue",
}

class Logger:
	def __init__(self, quiet=False):
		self.__quiet = quiet

	@property
	def quiet(self):
		return self.__quiet

	def normal(self, msg, color=None):
		if not self.__quiet:
			print(colored(msg, self.normal_color if color is None else color))

	def raw(self, msg):
		if not self.__quiet:
			print(msg)

	def action(self, verb, path):
		""" Prints a file event, right aligning the verb so paths line up. """
		if not self.__quiet:
			print(f"{colored(verb.rjust(self.action_width), ACTION_COLORS.get(verb, self.normal_color))} {path}")

	def warning(self, msg):
		if not self.__quiet:
			print(colored(msg, self.warning_color))

	def error(self, msg):
		""" Errors are printed even when quiet. """
		print(colored(msg, self.error_color))

	@property
	def action_width(self): return 10

	@property
	def normal_color(self): return "cyan"

	@property
	def warning_color(self): return "yellow"

	@property
	def error_color(self): return "red"

DEFAULT = Logger()
