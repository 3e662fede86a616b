import unittest

from compress_ext.types.compression_format import CompressionFormat, compression_formats_from_text, SUPPORTED_EXTENSION_TOKENS

CF = CompressionFormat


class CompressionFormatTestCase(unittest.TestCase):
	TABLE = {
		'gz': (CF.gzip,),
		'bz': (CF.bzip,),
		'bz2': (CF.bzip,),
		'lz4': (CF.lz4,),
		'xz': (CF.lzma,),
		'lzma': (CF.lzma,),
		'sz': (CF.snappy,),
		'zst': (CF.zstd,),
		'zip': (CF.zip,),
		'tar': (CF.tar,),
		'tgz': (CF.tar, CF.gzip),
		'tbz': (CF.tar, CF.bzip),
		'tbz2': (CF.tar, CF.bzip),
		'tlz4': (CF.tar, CF.lz4),
		'txz': (CF.tar, CF.lzma),
		'tlzma': (CF.tar, CF.lzma),
		'tsz': (CF.tar, CF.snappy),
		'tzst': (CF.tar, CF.zstd),
	}

	def test_0_table(self):
		for token, formats in self.TABLE.items():
			with self.subTest(token=token):
				self.assertEqual(formats, compression_formats_from_text(token))
		self.assertEqual(set(self.TABLE.keys()), set(SUPPORTED_EXTENSION_TOKENS))

	def test_1_unknown(self):
		self.assertIsNone(compression_formats_from_text('unknown'))
		self.assertIsNone(compression_formats_from_text(''))
		self.assertIsNone(compression_formats_from_text('txt'))
		self.assertIsNone(compression_formats_from_text('lz'))

	def test_2_exact_match(self):
		self.assertIsNone(compression_formats_from_text('GZ'))
		self.assertIsNone(compression_formats_from_text('Tar'))
		self.assertIsNone(compression_formats_from_text('.gz'))
		self.assertIsNone(compression_formats_from_text('tar.gz'))
		self.assertIsNone(compression_formats_from_text(' gz'))

	def test_3_is_archive(self):
		archives = {CF.tar, CF.zip}
		for cf in CompressionFormat:
			with self.subTest(cf=cf):
				self.assertEqual(cf in archives, cf.is_archive_format())

	def test_4_text(self):
		expected = {
			CF.gzip: '.gz',
			CF.bzip: '.bz',
			CF.lz4: '.lz4',
			CF.lzma: '.lz',
			CF.snappy: '.sz',
			CF.tar: '.tar',
			CF.zstd: '.zst',
			CF.zip: '.zip',
		}
		self.assertEqual(set(CompressionFormat), set(expected.keys()))
		for cf, text in expected.items():
			self.assertEqual(text, str(cf))
			self.assertEqual(text, cf.text)

	def test_5_no_alias(self):
		self.assertEqual(len(CompressionFormat.__members__), len(CompressionFormat))
		self.assertEqual(len(CompressionFormat), len({cf.value for cf in CompressionFormat}))


if __name__ == '__main__':
	unittest.main()
