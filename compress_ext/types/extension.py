import dataclasses
from typing import Iterator, Tuple

from compress_ext.types.compression_format import CompressionFormat
from compress_ext.utils import misc_utils


@dataclasses.dataclass(frozen=True)
class Extension:
	"""
	A wrapper around :class:`CompressionFormat` that allows combinations like ``tgz``

	Only ``compression_formats`` takes part in the equality check and the hash,
	``display_text`` is the input text that produced the extension, like "tgz", "tar" or "xz"
	"""
	compression_formats: Tuple[CompressionFormat, ...]
	display_text: str = dataclasses.field(default='', compare=False)

	def __post_init__(self):
		# the sequence might be given as a list, store it immutably
		object.__setattr__(self, 'compression_formats', tuple(self.compression_formats))
		misc_utils.assert_true(len(self.compression_formats) > 0, lambda: 'Extension {!r} created with no compression format'.format(self.display_text))

	def is_archive(self) -> bool:
		"""
		Checks if the first format in ``compression_formats`` is an archive
		"""
		return self.compression_formats[0].is_archive_format()

	def __iter__(self) -> Iterator[CompressionFormat]:
		return iter(self.compression_formats)

	def __str__(self) -> str:
		return self.display_text

	def __repr__(self) -> str:
		return '{}({!r}, {})'.format(type(self).__name__, self.display_text, '[' + ', '.join(map(repr, self.compression_formats)) + ']')
