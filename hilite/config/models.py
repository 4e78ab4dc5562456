"""
Module: hilite.config.models

Immutable records describing an editor configuration.

Each record knows how to build itself from plain data (as produced by a YAML
loader) and how to turn itself back into plain data. Building is strict: a
missing field or a value of the wrong type raises ConfigParseError with the
dotted location of the offending value. Unknown keys are ignored.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from hilite.text.color import RGB, in_range


class ConfigError(Exception):
    """Base class for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when configuration text cannot be turned into a Configuration."""

    def __init__(self, diagnostic: str):
        super().__init__(diagnostic)
        self.diagnostic = diagnostic


# ------------------------------
# field readers
# ------------------------------


def _where(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _section(data: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ConfigParseError(f"{path or 'document'}: expected a mapping")
    return data


def _require(data: Mapping[str, Any], key: str, path: str) -> Any:
    if key not in data:
        raise ConfigParseError(f"{path or 'document'}: missing field `{key}`")
    return data[key]


def _int(value: Any, path: str) -> int:
    # bool is a subclass of int; reject it explicitly
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ConfigParseError(f"{path}: expected a non-negative integer")
    return value


def _str(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise ConfigParseError(f"{path}: expected a string")
    return value


def _str_list(value: Any, path: str) -> Tuple[str, ...]:
    if not isinstance(value, list):
        raise ConfigParseError(f"{path}: expected a list of strings")
    return tuple(_str(item, f"{path}[{i}]") for i, item in enumerate(value))


def _rgb(value: Any, path: str) -> RGB:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ConfigParseError(f"{path}: expected a list of 3 integers")
    for n in value:
        if not isinstance(n, int) or isinstance(n, bool) or not in_range(n):
            raise ConfigParseError(f"{path}: color components must be 0-255")
    return (value[0], value[1], value[2])


# ------------------------------
# records
# ------------------------------


@dataclass(frozen=True)
class GeneralSettings:
    line_number_padding_right: int
    line_number_padding_left: int
    tab_width: int
    undo_period: int

    @classmethod
    def from_dict(cls, data: Any, path: str = "general") -> "GeneralSettings":
        data = _section(data, path)
        return cls(
            **{
                name: _int(_require(data, name, path), _where(path, name))
                for name in cls.__dataclass_fields__
            }
        )

    def to_dict(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name in self.__dataclass_fields__}


@dataclass(frozen=True)
class ThemeColors:
    editor_bg: RGB
    editor_fg: RGB
    status_bg: RGB
    status_fg: RGB
    line_number_fg: RGB

    @classmethod
    def from_dict(cls, data: Any, path: str = "theme") -> "ThemeColors":
        data = _section(data, path)
        return cls(
            **{
                name: _rgb(_require(data, name, path), _where(path, name))
                for name in cls.__dataclass_fields__
            }
        )

    def to_dict(self) -> Dict[str, List[int]]:
        return {name: list(getattr(self, name)) for name in self.__dataclass_fields__}


def palette_from_dict(data: Any, path: str = "highlights") -> Mapping[str, RGB]:
    data = _section(data, path)
    palette = {
        _str(name, path): _rgb(rgb, _where(path, str(name)))
        for name, rgb in data.items()
    }
    return MappingProxyType(palette)


@dataclass(frozen=True)
class LanguageDefinition:
    name: str
    icon: str
    extensions: Tuple[str, ...]
    keywords: Tuple[str, ...]
    definitions: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_dict(cls, data: Any, path: str) -> "LanguageDefinition":
        data = _section(data, path)
        raw = _section(
            _require(data, "definitions", path), _where(path, "definitions")
        )
        definitions = {
            _str(category, _where(path, "definitions")): _str_list(
                patterns, _where(path, f"definitions.{category}")
            )
            for category, patterns in raw.items()
        }
        return cls(
            name=_str(_require(data, "name", path), _where(path, "name")),
            icon=_str(_require(data, "icon", path), _where(path, "icon")),
            extensions=_str_list(
                _require(data, "extensions", path), _where(path, "extensions")
            ),
            keywords=_str_list(
                _require(data, "keywords", path), _where(path, "keywords")
            ),
            definitions=MappingProxyType(definitions),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "icon": self.icon,
            "extensions": list(self.extensions),
            "keywords": list(self.keywords),
            "definitions": {k: list(v) for k, v in self.definitions.items()},
        }


@dataclass(frozen=True)
class Configuration:
    general: GeneralSettings
    theme: ThemeColors
    highlights: Mapping[str, RGB]
    languages: Tuple[LanguageDefinition, ...]

    @classmethod
    def from_dict(cls, data: Any) -> "Configuration":
        data = _section(data, "")
        languages = _require(data, "languages", "")
        if not isinstance(languages, list):
            raise ConfigParseError("languages: expected a list of languages")
        return cls(
            general=GeneralSettings.from_dict(_require(data, "general", "")),
            theme=ThemeColors.from_dict(_require(data, "theme", "")),
            highlights=palette_from_dict(_require(data, "highlights", "")),
            languages=tuple(
                LanguageDefinition.from_dict(lang, f"languages[{i}]")
                for i, lang in enumerate(languages)
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "general": self.general.to_dict(),
            "theme": self.theme.to_dict(),
            "highlights": {k: list(v) for k, v in self.highlights.items()},
            "languages": [lang.to_dict() for lang in self.languages],
        }


# ------------------------------
# load status
# ------------------------------


class StatusKind(Enum):
    SUCCESS = auto()
    FILE_NOT_FOUND = auto()
    PARSE_ERROR = auto()


@dataclass(frozen=True)
class LoadStatus:
    """How a Configuration was obtained."""

    kind: StatusKind
    diagnostic: Optional[str] = None

    @classmethod
    def success(cls) -> "LoadStatus":
        return cls(StatusKind.SUCCESS)

    @classmethod
    def file_not_found(cls) -> "LoadStatus":
        return cls(StatusKind.FILE_NOT_FOUND)

    @classmethod
    def parse_error(cls, diagnostic: str) -> "LoadStatus":
        return cls(StatusKind.PARSE_ERROR, diagnostic or "unknown parse error")

    @property
    def ok(self) -> bool:
        return self.kind is StatusKind.SUCCESS

    def __str__(self) -> str:
        if self.kind is StatusKind.SUCCESS:
            return "configuration loaded"
        if self.kind is StatusKind.FILE_NOT_FOUND:
            return "configuration file not found, using defaults"
        return f"configuration parse error, using defaults: {self.diagnostic}"
