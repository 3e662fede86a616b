import argparse
from typing import List, Dict, Optional

from compress_ext.cli import cli_utils
from compress_ext.cli.cmd import CliCommandAdapterBase
from compress_ext.cli.cmd.cmd_format import FormatCommandAdapter
from compress_ext.cli.cmd.cmd_list import ListCommandAdapter
from compress_ext.cli.cmd.cmd_path import PathCommandAdapter
from compress_ext.cli.return_codes import ErrorReturnCodes
from compress_ext.exceptions import UnsupportedFormat, ExtensionNotFound
from compress_ext.logger import get as get_logger
from compress_ext.utils import log_utils

__all__ = ['cli_entry']


def __prepare_logger():
	logger = get_logger()
	assert len(logger.handlers) == 1
	logger.handlers[0].setFormatter(log_utils.LOG_FORMATTER_NO_FUNC)


__prepare_logger()


class CliEntrypoint:
	def __init__(self):
		self.logger = get_logger()
		self.adaptors = self.__create_command_adapters()

	@classmethod
	def __create_command_adapters(cls) -> Dict[str, CliCommandAdapterBase]:
		all_adapters: List[CliCommandAdapterBase] = [
			FormatCommandAdapter(),
			ListCommandAdapter(),
			PathCommandAdapter(),
		]
		adaptor_by_command = {adapter.command: adapter for adapter in all_adapters}

		if len(all_adapters) != len(adaptor_by_command):
			raise AssertionError(all_adapters, adaptor_by_command)

		return adaptor_by_command

	def main(self, argv: Optional[List[str]] = None):
		parser = argparse.ArgumentParser(description='compress-ext v{} CLI tools'.format(cli_utils.get_version()), formatter_class=argparse.ArgumentDefaultsHelpFormatter)
		parser.add_argument('-c', '--config', help='Path to a json config file')
		parser.add_argument('--debug', action='store_true', help='Enable debug logging')
		subparsers = parser.add_subparsers(title='Command', help='Available commands', dest='command')

		for adapter in self.adaptors.values():
			subparser = subparsers.add_parser(adapter.command, help=adapter.description, description=adapter.description)
			adapter.build_parser(subparser)

		args = parser.parse_args(argv)
		if args.command is None:
			parser.print_help()
			return

		adapter = self.adaptors.get(args.command)
		if adapter is None:
			self.logger.error('Unknown command {!r}'.format(args.command))
			ErrorReturnCodes.invalid_argument.sys_exit()

		try:
			adapter.run(args)
		except UnsupportedFormat as e:
			self.logger.error('Unsupported format {!r}, known extensions: {}'.format(e.format_text, cli_utils.extension_options()))
			ErrorReturnCodes.unsupported_format.sys_exit()
		except ExtensionNotFound as e:
			self.logger.error('Cannot infer the format from file name {!r}, use --format to specify it'.format(e.path.name))
			ErrorReturnCodes.extension_not_found.sys_exit()


def cli_entry():
	CliEntrypoint().main()
