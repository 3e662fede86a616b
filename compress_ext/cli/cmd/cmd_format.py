import argparse
import dataclasses

from typing_extensions import override

from compress_ext.cli import cli_utils
from compress_ext.cli.cmd import CliCommandHandlerBase, CommonCommandArgs, CliCommandAdapterBase


@dataclasses.dataclass(frozen=True)
class FormatCommandArgs(CommonCommandArgs):
	format_text: str


class FormatCommandHandler(CliCommandHandlerBase):
	def __init__(self, args: FormatCommandArgs):
		super().__init__()
		self.args = args

	def handle(self):
		self.init_environment(self.args)

		extensions = cli_utils.parse_format(self.args.format_text)
		self.logger.info('Format {!r}: {} extension(s)'.format(self.args.format_text, len(extensions)))
		for extension in extensions:
			self.logger.info('  {}: {} archive={}'.format(extension.display_text, ', '.join(map(str, extension)), extension.is_archive()))
		self.logger.info('Pipeline: {}'.format(cli_utils.format_pipeline(extensions)))


class FormatCommandAdapter(CliCommandAdapterBase):
	@property
	@override
	def command(self) -> str:
		return 'format'

	@property
	@override
	def description(self) -> str:
		return 'Parse a format string into extensions'

	@override
	def build_parser(self, parser: argparse.ArgumentParser):
		parser.add_argument('format', help='The format string to parse. Example: tar.gz. Known extensions: {}'.format(cli_utils.extension_options()))

	@override
	def run(self, args: argparse.Namespace):
		handler = FormatCommandHandler(FormatCommandArgs(
			**self._make_common_args(args),
			format_text=args.format,
		))
		handler.handle()
