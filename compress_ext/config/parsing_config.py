from typing import Optional, Any

from mcdreforged.api.utils import Serializable


class ParsingConfig(Serializable):
	# format text used when a path has no known extension, e.g. "tar.gz"
	default_format: Optional[str] = None
	warn_extension_named_file: bool = True

	def validate_attribute(self, attr_name: str, attr_value: Any, **kwargs):
		super().validate_attribute(attr_name, attr_value, **kwargs)
		if attr_name == 'default_format' and attr_value is not None:
			from compress_ext.utils import extension_utils
			if not extension_utils.from_format_text(attr_value):
				raise ValueError('bad default format {!r}'.format(attr_value))
