import functools
from importlib import metadata
from pathlib import Path
from typing import Iterable, List, Optional

from compress_ext import constants, logger
from compress_ext.exceptions import UnsupportedFormat, ExtensionNotFound
from compress_ext.types.compression_format import SUPPORTED_EXTENSION_TOKENS
from compress_ext.types.extension import Extension
from compress_ext.utils import extension_utils


def extension_options() -> str:
	return ', '.join(SUPPORTED_EXTENSION_TOKENS)


@functools.lru_cache(None)
def get_version() -> str:
	try:
		return metadata.version(constants.DISTRIBUTION_NAME)
	except metadata.PackageNotFoundError as e:
		logger.get().error('Failed to get package version: {}'.format(e))
		return '?'


def parse_format(format_text: str) -> List[Extension]:
	"""
	:raise: UnsupportedFormat
	"""
	extensions = extension_utils.from_format_text(format_text)
	if not extensions:
		raise UnsupportedFormat(format_text)
	return extensions


def resolve_extensions(file_path: Path, format_text: Optional[str]) -> List[Extension]:
	"""
	Use the given format if there is one, otherwise infer the extensions from the file name

	:raise: UnsupportedFormat, ExtensionNotFound
	"""
	if format_text is not None:
		return parse_format(format_text)
	extensions = extension_utils.extensions_from_path(file_path)
	if len(extensions) == 0:
		raise ExtensionNotFound(file_path)
	return extensions


def format_pipeline(extensions: Iterable[Extension]) -> str:
	return ' -> '.join(cf.name for cf in extension_utils.flatten_compression_formats(extensions))
