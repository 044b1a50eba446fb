"""Schema-driven move parameters: short codes and ``[name=value,...]`` lists."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import TypeAlias

_LOGGER = logging.getLogger(__name__)

Value: TypeAlias = int | str | bool

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1

_NAME_RE = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")
_LIST_OPEN_RE = re.compile(r"\[\s*")
_LIST_CLOSE_RE = re.compile(r"\s*\]")
_EQUALS_RE = re.compile(r"\s*=\s*")
_SEPARATOR_RE = re.compile(r"\s*,\s*")
_STRING_RE = re.compile(r'"((?:[^"\\]|\\.)*)"')
_BOOL_RE = re.compile(r"(true|false|y|Y|n|N)(?![A-Za-z0-9_-])")
_NUMBER_RE = re.compile(r"[+-]?\d+")
_SHORT_REGION_RE = re.compile(r"[+\-<>\s]*")
_SHORT_RUN_RE = re.compile(r"\++|-+|>+|<+")
_ESCAPE_RE = re.compile(r"\\(.)")


# ── Schema ───────────────────────────────────────────────────────────────────


class Range(Enum):
    """Acceptable values for a parameter."""

    TEXT = "string"
    ANY = "number"
    POSITIVE = "number >= 0"
    STRICTLY_POSITIVE = "number > 0"
    BOOLEAN = "boolean"

    def validate(self, value: Value) -> None:
        """Raise :class:`ValueError` if *value* is not acceptable."""
        if isinstance(value, bool):
            if self is not Range.BOOLEAN:
                raise ValueError(f"{format_value(value)} unexpected, want {self.value}")
        elif isinstance(value, int):
            if self is Range.TEXT:
                raise ValueError(f'{value} unexpected, want "string"')
            if self is Range.BOOLEAN:
                raise ValueError(f"{value} out of range, expect boolean")
            if self is Range.POSITIVE and value < 0:
                raise ValueError(f"{value} out of range, must be >= 0")
            if self is Range.STRICTLY_POSITIVE and value <= 0:
                raise ValueError(f"{value} out of range, must be > 0")
        elif self is not Range.TEXT:
            raise ValueError(f"{format_value(value)} unexpected, want {self.value}")


@dataclass(frozen=True, slots=True)
class Detents:
    """Values selected by one to three repeated short-code symbols."""

    add1: int
    add2: int
    add3: int
    less1: int
    less2: int
    less3: int

    def value(self, level: int) -> int:
        """Value for a signed run length, e.g. ``-2`` for ``--``."""
        return {
            1: self.add1,
            2: self.add2,
            3: self.add3,
            -1: self.less1,
            -2: self.less2,
            -3: self.less3,
        }[level]

    def level(self, value: int) -> int | None:
        """Signed run length that selects *value*, if any."""
        for level in (1, 2, 3, -1, -2, -3):
            if self.value(level) == value:
                return level
        return None


class ShortKind(StrEnum):
    """Symbol pair used by a short code; the first symbol raises the value."""

    PLUS_MINUS = "+-"
    GREATER_LESS = "><"

    @property
    def up(self) -> str:
        return self.value[0]

    @property
    def down(self) -> str:
        return self.value[1]

    @classmethod
    def for_symbol(cls, symbol: str) -> ShortKind:
        return cls.PLUS_MINUS if symbol in "+-" else cls.GREATER_LESS


@dataclass(frozen=True, slots=True)
class Abbrev:
    """Short-code abbreviation attached to one numeric parameter."""

    kind: ShortKind
    detents: Detents

    def symbols(self, value: int) -> str:
        """Short-code run for *value*, or ``""`` if it is not a detent."""
        level = self.detents.level(value)
        if level is None:
            return ""
        return (self.kind.up if level > 0 else self.kind.down) * abs(level)


def plus_minus(add1: int, add2: int, add3: int, less1: int, less2: int, less3: int) -> Abbrev:
    return Abbrev(ShortKind.PLUS_MINUS, Detents(add1, add2, add3, less1, less2, less3))


def greater_less(add1: int, add2: int, add3: int, less1: int, less2: int, less3: int) -> Abbrev:
    return Abbrev(ShortKind.GREATER_LESS, Detents(add1, add2, add3, less1, less2, less3))


@dataclass(frozen=True, slots=True)
class ParamInfo:
    """Static description of one parameter of a move."""

    name: str
    doc: str
    default: Value
    range: Range
    short: Abbrev | None = None


@dataclass(frozen=True, slots=True)
class MoveParam:
    """A parameter's current value."""

    name: str
    value: Value

    def __str__(self) -> str:
        return f"{self.name}={format_value(self.value)}"


Schema: TypeAlias = Sequence[ParamInfo]


def number(
    name: str, doc: str, default: int, range: Range = Range.ANY, short: Abbrev | None = None
) -> ParamInfo:
    return ParamInfo(name, doc, default, range, short)


def text(name: str, doc: str, default: str = "") -> ParamInfo:
    return ParamInfo(name, doc, default, Range.TEXT)


def boolean(name: str, doc: str, default: bool = False) -> ParamInfo:
    return ParamInfo(name, doc, default, Range.BOOLEAN)


# ── Values ───────────────────────────────────────────────────────────────────


def format_value(value: Value) -> str:
    """Render a value as it is written inside ``[...]``."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _match_value(text: str, pos: int) -> tuple[Value, int]:
    if m := _STRING_RE.match(text, pos):
        return _ESCAPE_RE.sub(r"\1", m.group(1)), m.end()
    if m := _BOOL_RE.match(text, pos):
        return m.group(1) in ("true", "y", "Y"), m.end()
    if m := _NUMBER_RE.match(text, pos):
        value = int(m.group())
        if not (_I32_MIN <= value <= _I32_MAX):
            raise ValueError(f"Number out of range: {m.group()!r}")
        return value, m.end()
    raise ValueError(f"Invalid parameter value at {text[pos:]!r}")


def parse_value(text: str) -> Value:
    """Parse a single value written as in ``[name=value]``."""
    value, end = _match_value(text, 0)
    if end != len(text):
        raise ValueError(f"Invalid parameter value: {text!r}")
    return value


def parse_name_values(text: str) -> list[MoveParam]:
    """Parse a complete bracketed ``[name=value, ...]`` list."""
    opening = _LIST_OPEN_RE.match(text)
    if opening is None:
        raise ValueError(f"Expected '[' at {text!r}")
    pos = opening.end()
    result: list[MoveParam] = []
    closing = _LIST_CLOSE_RE.match(text, pos)
    while closing is None:
        m = _NAME_RE.match(text, pos)
        if m is None:
            raise ValueError(f"Expected parameter name at {text[pos:]!r}")
        eq = _EQUALS_RE.match(text, m.end())
        if eq is None:
            raise ValueError(f"Expected '=' after parameter {m.group()!r}")
        value, pos = _match_value(text, eq.end())
        result.append(MoveParam(m.group(), value))
        closing = _LIST_CLOSE_RE.match(text, pos)
        if closing is None:
            sep = _SEPARATOR_RE.match(text, pos)
            if sep is None:
                raise ValueError(f"Expected ',' or ']' at {text[pos:]!r}")
            pos = sep.end()
    rest = text[closing.end() :]
    if rest.strip():
        raise ValueError(f"Unexpected text after parameters: {rest.strip()!r}")
    return result


# ── Codec ────────────────────────────────────────────────────────────────────


def defaults(schema: Schema) -> list[MoveParam]:
    return [MoveParam(info.name, info.default) for info in schema]


def compatible(schema: Schema, params: Sequence[MoveParam]) -> bool:
    """Whether *params* has exactly the schema's names in schema order."""
    return len(schema) == len(params) and all(
        info.name == param.name for info, param in zip(schema, params)
    )


def param_map(params: Sequence[MoveParam]) -> dict[str, Value]:
    return {param.name: param.value for param in params}


def _short_runs(region: str) -> dict[ShortKind, int]:
    runs = _SHORT_RUN_RE.findall(region)
    if len(runs) > 2:
        raise ValueError(f"Too many short codes: {region.strip()!r}")
    levels: dict[ShortKind, int] = {}
    for run in runs:
        kind = ShortKind.for_symbol(run[0])
        if kind in levels:
            raise ValueError(f"Conflicting short codes: {region.strip()!r}")
        if len(run) > 3:
            raise ValueError(f"Short code too long: {run!r}")
        levels[kind] = len(run) if run[0] == kind.up else -len(run)
    return levels


def populate(schema: Schema, text: str) -> list[MoveParam]:
    """Resolve parameter *text* (short codes then an optional list) against *schema*."""
    params = defaults(schema)
    region = _SHORT_REGION_RE.match(text)
    assert region is not None
    for kind, level in _short_runs(region.group()).items():
        idx = next(
            (i for i, info in enumerate(schema) if info.short and info.short.kind == kind),
            None,
        )
        if idx is None:
            raise ValueError(f"No parameter takes {kind.up!r}/{kind.down!r} short codes")
        abbrev = schema[idx].short
        assert abbrev is not None
        params[idx] = MoveParam(schema[idx].name, abbrev.detents.value(level))

    rest = text[region.end() :]
    if not rest:
        return params
    names = [info.name for info in schema]
    for explicit in parse_name_values(rest):
        if explicit.name not in names:
            raise ValueError(f"Unknown parameter {explicit.name!r}")
        idx = names.index(explicit.name)
        schema[idx].range.validate(explicit.value)
        params[idx] = explicit
    _LOGGER.debug("populated %r as %s", text, params)
    return params


def to_string(schema: Schema, params: Sequence[MoveParam]) -> str:
    """Shortest text that :func:`populate` turns back into *params*."""
    if not compatible(schema, params):
        raise ValueError(f"Parameters {list(params)} do not match schema")
    shorts = ""
    explicit: list[MoveParam] = []
    for info, param in zip(schema, params):
        if param.value == info.default and type(param.value) is type(info.default):
            continue
        symbols = ""
        if info.short is not None and not isinstance(param.value, (bool, str)):
            symbols = info.short.symbols(param.value)
        if symbols:
            shorts += symbols
        else:
            explicit.append(param)
    if not explicit:
        return shorts
    return shorts + "[" + ",".join(str(param) for param in explicit) + "]"
