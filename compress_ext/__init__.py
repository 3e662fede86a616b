from compress_ext.types.compression_format import CompressionFormat, compression_formats_from_text
from compress_ext.types.extension import Extension
from compress_ext.utils.extension_utils import from_format_text, separate_known_extensions_from_name, extensions_from_path

__all__ = [
	'CompressionFormat',
	'Extension',
	'compression_formats_from_text',
	'from_format_text',
	'separate_known_extensions_from_name',
	'extensions_from_path',
]
