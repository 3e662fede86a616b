import enum
import sys

from typing_extensions import NoReturn


class ErrorReturnCodes(enum.Enum):
	invalid_argument = 1
	argparse_error = 2  # see argparse.ArgumentParser.error
	unsupported_format = 3
	extension_not_found = 4
	bad_config = 5

	def sys_exit(self) -> NoReturn:
		sys.exit(self.value)
