PACKAGE_ID = 'compress_ext'
DISTRIBUTION_NAME = 'compress-ext'
