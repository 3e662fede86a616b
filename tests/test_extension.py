import unittest

from compress_ext.types.compression_format import CompressionFormat
from compress_ext.types.extension import Extension

CF = CompressionFormat


class ExtensionTestCase(unittest.TestCase):
	def test_0_equality_ignores_display_text(self):
		a = Extension((CF.tar, CF.gzip), 'tgz')
		b = Extension((CF.tar, CF.gzip), 'tar.gz')
		self.assertEqual(a, b)
		self.assertEqual(hash(a), hash(b))
		self.assertEqual(1, len({a, b}))

		self.assertNotEqual(Extension((CF.tar,), 'tar'), Extension((CF.tar, CF.gzip), 'tar'))
		self.assertNotEqual(Extension((CF.gzip, CF.tar), 'x'), Extension((CF.tar, CF.gzip), 'x'))

	def test_1_empty_formats(self):
		with self.assertRaises(AssertionError):
			Extension((), 'foo')
		with self.assertRaises(AssertionError):
			Extension([], '')

	def test_2_list_input(self):
		ext = Extension([CF.tar, CF.zstd], 'tzst')
		self.assertEqual((CF.tar, CF.zstd), ext.compression_formats)
		self.assertEqual(Extension((CF.tar, CF.zstd), 'tzst'), ext)

	def test_3_is_archive(self):
		self.assertTrue(Extension((CF.zip,), 'zip').is_archive())
		self.assertTrue(Extension((CF.tar, CF.gzip), 'tgz').is_archive())
		self.assertFalse(Extension((CF.gzip,), 'gz').is_archive())
		# only the first format counts
		self.assertFalse(Extension((CF.gzip, CF.tar), 'x').is_archive())

	def test_4_iter_and_str(self):
		ext = Extension((CF.tar, CF.lzma), 'txz')
		self.assertEqual([CF.tar, CF.lzma], list(ext))
		self.assertEqual('txz', str(ext))
		self.assertIn('txz', repr(ext))

	def test_5_immutable(self):
		ext = Extension((CF.gzip,), 'gz')
		with self.assertRaises(AttributeError):
			ext.display_text = 'foo'  # type: ignore


if __name__ == '__main__':
	unittest.main()
