import functools
import json
import logging
from typing import Optional

from mcdreforged.api.utils import Serializable

from compress_ext.config.parsing_config import ParsingConfig
from compress_ext.types.common import PathLike


class Config(Serializable):
	debug: bool = False

	parsing: ParsingConfig = ParsingConfig()

	# ==================== Instance getters ====================

	@classmethod
	@functools.lru_cache
	def __get_default(cls) -> 'Config':
		return Config.get_default()

	@classmethod
	def get(cls) -> 'Config':
		if _config is None:
			return cls.__get_default()
		return _config

	@classmethod
	def load(cls, file_path: PathLike) -> 'Config':
		"""
		:raise: OSError, ValueError
		"""
		with open(file_path, 'r', encoding='utf8') as f:
			data = json.load(f)
		if not isinstance(data, dict):
			raise ValueError('config root should be a dict, found {}'.format(type(data).__name__))
		return cls.deserialize(data)


_config: Optional[Config] = None


def set_config_instance(cfg: Config):
	global _config
	_config = cfg

	from compress_ext import logger
	logger.get().setLevel(logging.DEBUG if cfg.debug else logging.INFO)
	if cfg.debug:
		logger.get().debug('debug on')
