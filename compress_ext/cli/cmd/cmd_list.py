import argparse
import dataclasses

from typing_extensions import override

from compress_ext.cli.cmd import CliCommandHandlerBase, CommonCommandArgs, CliCommandAdapterBase
from compress_ext.types.compression_format import SUPPORTED_EXTENSION_TOKENS, compression_formats_from_text


@dataclasses.dataclass(frozen=True)
class ListCommandArgs(CommonCommandArgs):
	archive_only: bool


class ListCommandHandler(CliCommandHandlerBase):
	def __init__(self, args: ListCommandArgs):
		super().__init__()
		self.args = args

	def handle(self):
		self.init_environment(self.args)

		for token in SUPPORTED_EXTENSION_TOKENS:
			formats = compression_formats_from_text(token)
			if self.args.archive_only and not formats[0].is_archive_format():
				continue
			self.logger.info('%s', '{}: {}'.format(token, ', '.join(cf.name for cf in formats)))


class ListCommandAdapter(CliCommandAdapterBase):
	@property
	@override
	def command(self) -> str:
		return 'list'

	@property
	@override
	def description(self) -> str:
		return 'List supported extensions'

	@override
	def build_parser(self, parser: argparse.ArgumentParser):
		parser.add_argument('-a', '--archive-only', action='store_true', help='Only list extensions of archive formats')

	@override
	def run(self, args: argparse.Namespace):
		handler = ListCommandHandler(ListCommandArgs(
			**self._make_common_args(args),
			archive_only=args.archive_only,
		))
		handler.handle()
