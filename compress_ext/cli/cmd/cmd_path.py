import argparse
import dataclasses
from pathlib import Path
from typing import Optional

from typing_extensions import override

from compress_ext.cli import cli_utils
from compress_ext.cli.cmd import CliCommandHandlerBase, CommonCommandArgs, CliCommandAdapterBase
from compress_ext.exceptions import ExtensionNotFound
from compress_ext.utils import extension_utils


@dataclasses.dataclass(frozen=True)
class PathCommandArgs(CommonCommandArgs):
	file_path: Path
	format: Optional[str]


class PathCommandHandler(CliCommandHandlerBase):
	def __init__(self, args: PathCommandArgs):
		super().__init__()
		self.args = args

	def handle(self):
		self.init_environment(self.args)

		file_path = self.args.file_path
		base_path, _ = extension_utils.separate_known_extensions_from_name(file_path)
		try:
			extensions = cli_utils.resolve_extensions(file_path, self.args.format)
		except ExtensionNotFound:
			if (default_format := self.config.parsing.default_format) is None:
				raise
			self.logger.info('No known extension in {!r}, using the default format {!r}'.format(file_path.as_posix(), default_format))
			extensions = cli_utils.parse_format(default_format)

		if self.config.parsing.warn_extension_named_file and extension_utils.is_extension_named_file(file_path):
			self.logger.warning('The name of {!r} is an extension itself, it is treated as a file named {!r}'.format(file_path.as_posix(), base_path.name))

		self.logger.info('Path: {}'.format(file_path.as_posix()))
		self.logger.info('Base: {}'.format(base_path.as_posix()))
		self.logger.info('Extensions: {}'.format(', '.join(map(str, extensions))))
		self.logger.info('Pipeline: {}'.format(cli_utils.format_pipeline(extensions)))
		self.logger.info('Archive: {}'.format(extensions[0].is_archive()))


class PathCommandAdapter(CliCommandAdapterBase):
	@property
	@override
	def command(self) -> str:
		return 'path'

	@property
	@override
	def description(self) -> str:
		return 'Separate the known extensions from a file path'

	@override
	def build_parser(self, parser: argparse.ArgumentParser):
		parser.add_argument('path', help='The file path to inspect. Example: my_archive.tar.gz')
		parser.add_argument('-f', '--format', help='The format of the file. If not given, attempt to infer from the file name. Example: tar.gz')

	@override
	def run(self, args: argparse.Namespace):
		handler = PathCommandHandler(PathCommandArgs(
			**self._make_common_args(args),
			file_path=Path(args.path),
			format=args.format,
		))
		handler.handle()
