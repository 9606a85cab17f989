"""Exceptions raised while loading dictionaries and converter configs.

Conversion itself never raises on content: unmatched segments pass
through and malformed UTF-8 degrades to single-byte segments.
"""


class HanconvError(Exception):
    """Base class for hanconv errors."""


class ConfigError(HanconvError, ValueError):
    """Invalid converter configuration."""


class MissingFieldError(ConfigError):
    """A required configuration field is absent."""

    def __init__(self, field_name: str):
        super().__init__(f"Missing required field: {field_name}")
        self.field_name = field_name


class UnknownDictTypeError(ConfigError):
    """A dictionary config names a type with no registered loader."""

    def __init__(self, dict_type: str, available: list[str]):
        super().__init__(
            f"Unknown dictionary type: {dict_type!r}. Available: {available}"
        )
        self.dict_type = dict_type


class DictionaryNotFoundError(HanconvError, FileNotFoundError):
    """A dictionary file could not be located in any search path."""

    def __init__(self, filename: str, search_paths: list[str]):
        super().__init__(
            f"Dictionary file not found: {filename} (searched in: {search_paths})"
        )
        self.filename = filename
        self.search_paths = search_paths
