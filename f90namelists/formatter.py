"""Formatter that writes a namelist document back to text."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import IO, Any, NotRequired, Optional, TypedDict

from f90namelists.converter import to_literal
from f90namelists.logger import Logger
from f90namelists.nodes import NamelistDocument, NamelistGroup, NamelistValue, validate_document
from f90namelists.utils import is_path, resolve_config


class FormatterConfig(TypedDict):
    enable_logger: NotRequired[bool]
    validate: NotRequired[bool]


class FormatterConfigRequired(TypedDict):
    enable_logger: bool
    validate: bool


DEFAULT_CONFIG: FormatterConfigRequired = {"enable_logger": False, "validate": True}


@dataclass
class NamelistFormatter:
    indent: str = ""
    config: Optional[FormatterConfig] = None
    _settings: FormatterConfigRequired = field(init=False, repr=False)

    def __post_init__(self):
        self._settings = resolve_config(self.config or {}, DEFAULT_CONFIG)
        self.logger = Logger("formatter", is_enabled=self._settings["enable_logger"]).logger

    def format_document(self, document: NamelistDocument) -> str:
        if self._settings["validate"]:
            document = validate_document(document)
        lines: list[str] = []
        for name, group in document.items():
            lines.extend(self.format_group(name, group))
        text = "\n".join(lines)
        self.logger.debug(f"Formatted {len(document)} group(s):\n{text}")
        return text

    def format_group(self, name: str, group: NamelistGroup) -> list[str]:
        lines = [f"&{name}"]
        for key, value in group.items():
            lines.append(self.format_entry(key, value))
        lines.append("/")
        return lines

    def format_entry(self, key: str, value: NamelistValue) -> str:
        return f"{self.indent}{key} = {self.format_value(value)}"

    def format_value(self, value: NamelistValue) -> str:
        if isinstance(value, list):
            return " ".join(to_literal(item) for item in value)
        return to_literal(value)

    def write(self, target: str | PathLike | IO[str], document: NamelistDocument) -> str:
        text = self.format_document(document)
        if is_path(target):
            with open(target, "w", encoding="utf-8") as handle:
                handle.write(text)
        else:
            target.write(text)  # type: ignore[union-attr]
        return text


def write(target: str | PathLike | IO[str], document: Any, verbose: bool = False) -> str:
    """Write ``document`` as namelist text to a path or text stream and return the text."""
    return NamelistFormatter(config={"enable_logger": verbose}).write(target, document)


__all__ = ["FormatterConfig", "NamelistFormatter", "write"]
