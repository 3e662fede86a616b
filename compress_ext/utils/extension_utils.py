from pathlib import Path
from typing import List, Optional, Tuple, Iterable

from compress_ext import logger
from compress_ext.types.common import PathLike
from compress_ext.types.compression_format import CompressionFormat, compression_formats_from_text
from compress_ext.types.extension import Extension


def from_format_text(format_text: str) -> Optional[List[Extension]]:
	"""
	Parse a user given format, like "tar.gz", ".tar.gz" or "tgz"

	Empty pieces are ignored, so leading, trailing and repeated dots are fine.
	If any piece is unknown, None is returned, even if other pieces are known

	Notes: the result is in reversed piece order, "tar.gz" gives [gz, tar]
	"""
	extensions: List[Extension] = []
	for piece in format_text.split('.'):
		if len(piece) == 0:
			continue
		formats = compression_formats_from_text(piece)
		if formats is None:
			logger.get().debug('Unknown extension {!r} in format {!r}'.format(piece, format_text))
			return None
		extensions.append(Extension(formats, piece))

	extensions.reverse()
	return extensions


def separate_known_extensions_from_name(path: PathLike) -> Tuple[Path, List[Extension]]:
	"""
	Strip the known extensions at the tail of the path

	:return: the remaining path, and the stripped extensions from left to right,
	e.g. "foo/bar.tar.gz" -> ("foo/bar", [tar, gz])
	"""
	path = Path(path)
	extensions: List[Extension] = []

	# pathlib treats a name with a single leading dot, like ".tar", as having no suffix
	while len(path.suffix) > 1:
		extension = path.suffix[1:]
		formats = compression_formats_from_text(extension)
		if formats is None:
			break
		extensions.append(Extension(formats, extension))
		path = path.with_suffix('')

	# extensions were collected from right to left
	extensions.reverse()
	return path, extensions


def extensions_from_path(path: PathLike) -> List[Extension]:
	_, extensions = separate_known_extensions_from_name(path)
	return extensions


def flatten_compression_formats(extensions: Iterable[Extension]) -> List[CompressionFormat]:
	return [cf for extension in extensions for cf in extension]


def is_extension_named_file(path: PathLike) -> bool:
	"""
	Check if the file name left after stripping known extensions is itself a known extension,
	e.g. ".tar.gz" is a gzip file named ".tar", which is probably not what the user wants
	"""
	base_path, extensions = separate_known_extensions_from_name(path)
	if len(extensions) == 0:
		return False
	name = base_path.name
	if name.startswith('.'):
		name = name[1:]
	return compression_formats_from_text(name) is not None
