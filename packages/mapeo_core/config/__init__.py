"""Mapeo configuration readers (legacy Mapeo and CoMapeo formats)."""

from .aggregate import get_config
from .errors import ConfigDirectoryNotFound, ConfigError, ConfigParseFailure
from .fields import get_fields
from .fixtures import write_fixture
from .formats import COMAPEO, LEGACY, classify_field, classify_preset
from .icons import ICON_NOT_FOUND_MESSAGE, get_icon, icon_file_name
from .log import silent_logger, verbose_logger
from .messages import get_messages
from .ordering import compare_strings, preset_order, sort_presets
from .presets import build_base_url, get_presets
from .simple_files import get_defaults, get_metadata, get_stylesheet

__all__ = [
    "get_config",
    "ConfigDirectoryNotFound",
    "ConfigError",
    "ConfigParseFailure",
    "get_fields",
    "write_fixture",
    "COMAPEO",
    "LEGACY",
    "classify_field",
    "classify_preset",
    "ICON_NOT_FOUND_MESSAGE",
    "get_icon",
    "icon_file_name",
    "silent_logger",
    "verbose_logger",
    "get_messages",
    "compare_strings",
    "preset_order",
    "sort_presets",
    "build_base_url",
    "get_presets",
    "get_defaults",
    "get_metadata",
    "get_stylesheet",
]
