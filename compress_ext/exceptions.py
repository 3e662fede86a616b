from pathlib import Path


class CompressExtError(Exception):
	pass


class UnsupportedFormat(CompressExtError):
	def __init__(self, format_text: str):
		super().__init__('unsupported format {!r}'.format(format_text))
		self.format_text = format_text


class ExtensionNotFound(CompressExtError):
	def __init__(self, path: Path):
		super().__init__('no known extension found in {!r}'.format(str(path)))
		self.path = path
