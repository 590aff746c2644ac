"""Structural comparison of JSON values, producing a list of differences."""

from __future__ import annotations

import enum
import json
import struct
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Union

from jsonmatch.config import ArraySortingMode, CompareMode, Config, NumericMode
from jsonmatch.textutil import indent, indexes

_DEFAULT_MAX_ULPS = 4
_I64_MAX = 2**63 - 1


class _Missing(enum.Enum):
    MISSING = "missing"

    def __repr__(self) -> str:
        return "<missing>"


_MISSING = _Missing.MISSING


@dataclass(frozen=True)
class Key:
    """An index into a JSON array (``int``) or a field of a JSON object (``str``)."""

    value: Union[int, str]

    def __str__(self) -> str:
        if isinstance(self.value, int):
            return f"[{self.value}]"
        return f".{self.value}"


@dataclass(frozen=True)
class Path:
    """Location of a value inside a JSON tree; no keys means the root."""

    keys: tuple[Key, ...] = ()

    def append(self, key: Key) -> Path:
        """Return a new path with ``key`` added at the end."""
        return Path(self.keys + (key,))

    @property
    def is_root(self) -> bool:
        return not self.keys

    def __str__(self) -> str:
        if self.is_root:
            return "(root)"
        return "".join(str(key) for key in self.keys)


def _pretty(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


@dataclass(frozen=True)
class Difference:
    """A difference between two JSON values found at ``path``.

    Either side may be missing; see ``lhs_missing`` and ``rhs_missing``.
    """

    path: Path
    lhs: Any
    rhs: Any
    config: Config

    def __post_init__(self) -> None:
        if self.lhs is _MISSING and self.rhs is _MISSING:
            raise ValueError("a difference cannot miss both sides")

    @property
    def lhs_missing(self) -> bool:
        return self.lhs is _MISSING

    @property
    def rhs_missing(self) -> bool:
        return self.rhs is _MISSING

    def __str__(self) -> str:
        inclusive = self.config.compare_mode is CompareMode.INCLUSIVE
        if not self.lhs_missing and not self.rhs_missing:
            if inclusive:
                sides = (("expected", self.rhs), ("actual", self.lhs))
            else:
                sides = (("lhs", self.lhs), ("rhs", self.rhs))
            lines = [f'json atoms at path "{self.path}" are not equal:']
            for label, value in sides:
                lines.append(f"    {label}:")
                lines.append(indent(_pretty(value), 8))
            return "\n".join(lines)

        if inclusive:
            side = "actual" if self.lhs_missing else "expected"
        else:
            side = "lhs" if self.lhs_missing else "rhs"
        return f'json atom at path "{self.path}" is missing from {side}'


def _kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    raise TypeError(f"not a JSON value: {value!r}")


def _json_equal(lhs: Any, rhs: Any) -> bool:
    """Type-aware JSON equality: ``1`` differs from ``1.0`` and from ``True``."""
    kind = _kind(lhs)
    if kind != _kind(rhs):
        return False
    if kind == "array":
        return len(lhs) == len(rhs) and all(map(_json_equal, lhs, rhs))
    if kind == "object":
        return lhs.keys() == rhs.keys() and all(
            _json_equal(value, rhs[key]) for key, value in lhs.items()
        )
    return lhs == rhs


def _float_bits(value: float) -> int:
    return struct.unpack("<q", struct.pack("<d", value))[0]


def _approx_eq(lhs: float, rhs: float, epsilon: float) -> bool:
    if lhs == rhs or abs(lhs - rhs) <= epsilon:
        return True
    delta = _float_bits(lhs) - _float_bits(rhs)
    delta = ((delta + 2**63) % 2**64) - 2**63
    return min(abs(delta), _I64_MAX) <= _DEFAULT_MAX_ULPS


def _eq_floats(lhs: float, rhs: float, config: Config) -> bool:
    epsilon = config.float_compare_mode.epsilon
    if epsilon is None:
        return lhs == rhs
    return _approx_eq(lhs, rhs, epsilon)


def _numbers_equal(lhs: Any, rhs: Any, config: Config) -> bool:
    rhs_kind = _kind(rhs)
    if config.numeric_mode is NumericMode.ASSUME_FLOAT:
        if rhs_kind not in ("int", "float"):
            return False
        try:
            return _eq_floats(float(lhs), float(rhs), config)
        except OverflowError:
            return False
    if isinstance(lhs, float) and rhs_kind == "float":
        return _eq_floats(lhs, rhs, config)
    return _json_equal(lhs, rhs)


def _matches(lhs: Any, rhs: Any, config: Config) -> bool:
    return next(_diff(lhs, rhs, config, Path()), None) is None


def _diff_array_contains(
    lhs: list, rhs: Any, config: Config, path: Path
) -> Iterator[Difference]:
    if not isinstance(rhs, list):
        yield Difference(path, lhs, rhs, config)
        return
    if config.compare_mode is CompareMode.STRICT and len(lhs) != len(rhs):
        yield Difference(path, lhs, rhs, config)
        return
    for expected in rhs:
        needed = sum(1 for other in rhs if _matches(expected, other, config))
        found = sum(1 for item in lhs if _matches(item, expected, config))
        if found < needed:
            yield Difference(path, lhs, rhs, config)
            return


def _diff_array(lhs: list, rhs: Any, config: Config, path: Path) -> Iterator[Difference]:
    if config.array_sorting_mode is ArraySortingMode.IGNORE:
        yield from _diff_array_contains(lhs, rhs, config, path)
        return
    if not isinstance(rhs, list):
        yield Difference(path, lhs, rhs, config)
        return

    if config.compare_mode is CompareMode.INCLUSIVE:
        for idx, expected in enumerate(rhs):
            item_path = path.append(Key(idx))
            if idx < len(lhs):
                yield from _diff(lhs[idx], expected, config, item_path)
            else:
                yield Difference(item_path, _MISSING, rhs, config)
        return

    for idx in sorted(set(indexes(rhs)) | set(indexes(lhs))):
        item_path = path.append(Key(idx))
        left = lhs[idx] if idx < len(lhs) else _MISSING
        right = rhs[idx] if idx < len(rhs) else _MISSING
        if left is _MISSING or right is _MISSING:
            yield Difference(item_path, left, right, config)
        else:
            yield from _diff(left, right, config, item_path)


def _diff_object(lhs: dict, rhs: Any, config: Config, path: Path) -> Iterator[Difference]:
    if not isinstance(rhs, dict):
        yield Difference(path, lhs, rhs, config)
        return

    if config.compare_mode is CompareMode.INCLUSIVE:
        for key, expected in rhs.items():
            field_path = path.append(Key(key))
            if key in lhs:
                yield from _diff(lhs[key], expected, config, field_path)
            else:
                yield Difference(field_path, _MISSING, rhs, config)
        return

    all_keys = list(rhs) + [key for key in lhs if key not in rhs]
    for key in all_keys:
        field_path = path.append(Key(key))
        left = lhs.get(key, _MISSING)
        right = rhs.get(key, _MISSING)
        if left is _MISSING or right is _MISSING:
            yield Difference(field_path, left, right, config)
        else:
            yield from _diff(left, right, config, field_path)


def _diff(lhs: Any, rhs: Any, config: Config, path: Path) -> Iterator[Difference]:
    kind = _kind(lhs)
    if kind == "array":
        yield from _diff_array(lhs, rhs, config, path)
    elif kind == "object":
        yield from _diff_object(lhs, rhs, config, path)
    elif kind in ("int", "float"):
        if not _numbers_equal(lhs, rhs, config):
            yield Difference(path, lhs, rhs, config)
    elif not _json_equal(lhs, rhs):
        yield Difference(path, lhs, rhs, config)


def diff(lhs: Any, rhs: Any, config: Config) -> list[Difference]:
    """Compare two JSON values and return every difference found."""
    return list(_diff(lhs, rhs, config, Path()))