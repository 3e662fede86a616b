import logging

LOG_FORMATTER = logging.Formatter('[%(asctime)s %(levelname)s] (%(funcName)s) %(message)s')
LOG_FORMATTER_NO_FUNC = logging.Formatter('[%(asctime)s %(levelname)s] %(message)s')
LOG_FORMATTER.default_msec_format = '%s.%03d'
LOG_FORMATTER_NO_FUNC.default_msec_format = '%s.%03d'


def get_log_level() -> int:
	from compress_ext.config.config import Config
	return logging.DEBUG if Config.get().debug else logging.INFO
