"""
Module: importer.config_reader

Purpose:
    Read the section-less ``key = value`` files (track.ini, config.ini)
    found in curriculum directories.

Key Classes:
    - ConfigReader: String/integer lookup by key
    - ConfigError: Raised for values that cannot be converted

Dependencies:
    - configparser (std)

Used By:
    - importer.tracks: track.ini
    - importer.missions: config.ini
"""

from __future__ import annotations

import configparser
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_SECTION = "curriculum"


class ConfigError(ValueError):
    """Raised when a config value has the wrong type."""

    def __init__(self, message: str, key: str = "", path: Optional[Path] = None):
        super().__init__(message)
        self.key = key
        self.path = path


class ConfigReader:
    """
    Key/value lookup over one config file.

    The files have no section headers, so the content is parsed under a
    synthetic section. Keys are case-sensitive and values are not
    interpolated.

    Example:
        >>> cfg = ConfigReader.from_string("title = Loops\\nreward = 20\\n")
        >>> cfg.get_str("title")
        'Loops'
        >>> cfg.get_int("reward", 10)
        20
    """

    def __init__(self, values: dict[str, str], path: Optional[Path] = None):
        self._values = values
        self.path = path

    @classmethod
    def from_string(cls, text: str, path: Optional[Path] = None) -> ConfigReader:
        parser = configparser.ConfigParser(
            interpolation=None,
            default_section="__defaults__",
            strict=False,
        )
        parser.optionxform = str  # type: ignore[assignment]
        try:
            parser.read_string(f"[{_SECTION}]\n{text}", source=str(path or "<string>"))
        except configparser.Error as e:
            raise ConfigError(f"Cannot parse {path or 'config'}: {e}", path=path) from e
        return cls(dict(parser.items(_SECTION)), path=path)

    @classmethod
    def from_path(cls, path: Path) -> ConfigReader:
        """
        Read ``path``; a missing file yields an empty reader.

        Raises:
            ConfigError: If the file is not valid UTF-8 or cannot be parsed.
        """
        if not path.is_file():
            logger.debug(f"No config file at {path}")
            return cls({}, path=path)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ConfigError(f"Cannot decode {path} as UTF-8: {e}", path=path) from e
        return cls.from_string(text, path=path)

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def keys(self) -> list[str]:
        return list(self._values)

    def get_str(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._values.get(key)
        if value is None:
            return default
        return value.strip()

    def get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        """
        Look up an integer value.

        Raises:
            ConfigError: If the key is present but not an integer.
        """
        value = self.get_str(key)
        if value is None or value == "":
            return default
        try:
            return int(value)
        except ValueError as e:
            where = f" in {self.path}" if self.path else ""
            raise ConfigError(
                f"Value for {key!r}{where} is not an integer: {value!r}",
                key=key,
                path=self.path,
            ) from e
