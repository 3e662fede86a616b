import dataclasses
import enum
from typing import Dict, Optional, Tuple


@dataclasses.dataclass(frozen=True)
class _CompressionFormatItem:
	text: str
	archive: bool


@enum.unique
class CompressionFormat(enum.Enum):
	"""
	Accepted formats for input and output. Every member declares its own
	canonical text and archive classification, there is no fallback
	"""
	gzip = _CompressionFormatItem('.gz', archive=False)
	bzip = _CompressionFormatItem('.bz', archive=False)
	lz4 = _CompressionFormatItem('.lz4', archive=False)
	lzma = _CompressionFormatItem('.lz', archive=False)
	snappy = _CompressionFormatItem('.sz', archive=False)
	tar = _CompressionFormatItem('.tar', archive=True)
	zstd = _CompressionFormatItem('.zst', archive=False)
	zip = _CompressionFormatItem('.zip', archive=True)

	def is_archive_format(self) -> bool:
		"""
		Currently supported archive formats are .tar (and aliases to it) and .zip
		"""
		return self.value.archive

	@property
	def text(self) -> str:
		return self.value.text

	def __str__(self) -> str:
		return self.value.text

	def __repr__(self) -> str:
		return '{}.{}'.format(self.__class__.__name__, self.name)


_CF = CompressionFormat
__FORMATS_BY_TOKEN: Dict[str, Tuple[CompressionFormat, ...]] = {
	'tar': (_CF.tar,),
	'tgz': (_CF.tar, _CF.gzip),
	'tbz': (_CF.tar, _CF.bzip),
	'tbz2': (_CF.tar, _CF.bzip),
	'tlz4': (_CF.tar, _CF.lz4),
	'txz': (_CF.tar, _CF.lzma),
	'tlzma': (_CF.tar, _CF.lzma),
	'tsz': (_CF.tar, _CF.snappy),
	'tzst': (_CF.tar, _CF.zstd),
	'zip': (_CF.zip,),
	'bz': (_CF.bzip,),
	'bz2': (_CF.bzip,),
	'gz': (_CF.gzip,),
	'lz4': (_CF.lz4,),
	'xz': (_CF.lzma,),
	'lzma': (_CF.lzma,),
	'sz': (_CF.snappy,),
	'zst': (_CF.zstd,),
}
del _CF

SUPPORTED_EXTENSION_TOKENS: Tuple[str, ...] = tuple(__FORMATS_BY_TOKEN.keys())


def compression_formats_from_text(extension: str) -> Optional[Tuple[CompressionFormat, ...]]:
	"""
	Returns the compression formats that correspond to the given extension text,
	e.g. "tar" -> (tar,), "tgz" -> (tar, gzip)

	The match is exact and case-sensitive. Text containing a dot never matches
	"""
	return __FORMATS_BY_TOKEN.get(extension)


def __validate_compression_formats():
	for cf in CompressionFormat:
		if not isinstance(cf.value, _CompressionFormatItem):
			raise AssertionError('bad value for {}: {!r}'.format(cf, cf.value))
		if not cf.value.text.startswith('.'):
			raise AssertionError('bad text that does not start with "." for {}: {}'.format(cf, cf.value.text))
	for token, formats in __FORMATS_BY_TOKEN.items():
		if '.' in token or len(token) == 0:
			raise AssertionError('bad extension token {!r}'.format(token))
		if len(formats) == 0:
			raise AssertionError('extension token {!r} maps to no format'.format(token))


__validate_compression_formats()
