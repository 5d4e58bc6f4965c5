"""
Default text parsers derived from a key's fallback value.

The rules form a fixed, ordered table. The first rule whose type matches the
fallback wins, so ``bool`` must come before the integer rules and the bounded
integer widths before plain ``int``. No match means no parser, which is a
normal outcome rather than an error.
"""

from __future__ import annotations

import re
from typing import Any, Callable, Optional, Tuple, Type

from regkeys.core.exceptions import FormatError
from regkeys.keys.types import BoundedInt, Int8, Int16, Int32, Int64

Parser = Callable[[str], Any]
Stringer = Callable[[Any], str]

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_str(raw: str) -> str:
    return raw


def _parse_bool(raw: str) -> bool:
    lowered = raw.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise FormatError(raw, "bool")


def _parse_float(raw: str) -> float:
    if "_" in raw:
        raise FormatError(raw, "float", "underscores are not allowed")
    try:
        return float(raw)
    except ValueError as exc:
        raise FormatError(raw, "float") from exc


def _integer_parser(width: Type[BoundedInt], result: Callable[[int], Any]) -> Parser:
    low, high = width.bounds()
    label = f"{width.bits}-bit integer"
    max_digits = len(str(high))

    def parse(raw: str) -> Any:
        if not _INTEGER.fullmatch(raw):
            raise FormatError(raw, label)
        if len(raw.lstrip("+-").lstrip("0")) > max_digits:
            raise FormatError(raw, label, f"out of range [{low}, {high}]")
        number = int(raw)
        if not low <= number <= high:
            raise FormatError(raw, label, f"out of range [{low}, {high}]")
        return result(number)

    return parse


_RULES: Tuple[Tuple[type, Parser], ...] = (
    (str, _parse_str),
    (bool, _parse_bool),
    (float, _parse_float),
    (Int64, _integer_parser(Int64, Int64)),
    (Int32, _integer_parser(Int32, Int32)),
    (Int16, _integer_parser(Int16, Int16)),
    (Int8, _integer_parser(Int8, Int8)),
    # Plain int is Python's widest native integer; treat it as 64-bit.
    (int, _integer_parser(Int64, int)),
)


def infer_parser(value: Any) -> Optional[Parser]:
    """Return the default parser for a fallback value, or ``None`` when no rule matches."""
    if value is None:
        return None
    for rule_type, parser in _RULES:
        if isinstance(value, rule_type):
            return parser
    return None


def parser_for_type(tp: Any) -> Optional[Parser]:
    """Same table as :func:`infer_parser`, addressed by type rather than by instance."""
    if not isinstance(tp, type):
        return None
    for rule_type, parser in _RULES:
        if issubclass(tp, rule_type):
            return parser
    return None


def format_value(value: Any) -> str:
    """Render a value in the textual form the derived parsers accept."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    return str(value)
