"""Type descriptors used by generic containers.

A :class:`CType` describes how items of one kind are copied, formatted and
compared.  Built-in descriptors for the common scalar kinds are shared
singletons: every call to, say, :func:`ctype_int` returns the same object,
and descriptors compare equal only when they are the same object.
"""

from __future__ import annotations

import copy
import struct
import sys
from typing import Any, Callable, Optional, TextIO

__all__ = [
    "CType",
    "ctype_int",
    "ctype_long",
    "ctype_char",
    "ctype_bool",
    "ctype_size_t",
    "ctype_float",
    "ctype_double",
    "ctype_string",
]

Duplicator = Callable[[Any], Any]
Formatter = Callable[[Any], str]
Comparator = Callable[[Any, Any], int]


def _natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class CType:
    """Describes a kind of item: its size and how to copy, show and compare it.

    ``dup`` produces an independent copy of a value (validating it on the
    way), ``format`` turns a value into text, and ``compare`` returns a
    negative number, zero or a positive number as the first value is less
    than, equal to or greater than the second.

    Two descriptors are equal only if they are the same object.
    """

    __slots__ = ("name", "size", "_dup", "_format", "_compare")

    def __init__(
        self,
        name: str,
        size: int,
        dup: Optional[Duplicator] = None,
        format: Optional[Formatter] = None,
        compare: Optional[Comparator] = None,
    ) -> None:
        if size < 0:
            raise ValueError("size cannot be negative")
        self.name = name
        self.size = size
        self._dup: Duplicator = dup if dup is not None else copy.deepcopy
        self._format: Formatter = format if format is not None else str
        self._compare: Comparator = (
            compare if compare is not None else _natural_compare
        )

    def __repr__(self) -> str:
        return f"CType(name={self.name!r}, size={self.size})"

    def dup(self, value: Any) -> Any:
        """Return an independent copy of ``value``."""
        if value is None:
            raise ValueError("value cannot be None")
        return self._dup(value)

    def format(self, value: Any) -> str:
        """Return the human-readable text of ``value``."""
        if value is None:
            raise ValueError("value cannot be None")
        return self._format(value)

    def print(self, value: Any, file: Optional[TextIO] = None) -> None:
        """Write the text of ``value`` to ``file`` (standard output by default)."""
        text = self.format(value)
        (file if file is not None else sys.stdout).write(text)

    def compare(self, a: Any, b: Any) -> int:
        """Compare two values: negative if ``a < b``, zero if equal, positive if ``a > b``."""
        if a is None:
            raise ValueError("the first value cannot be None")
        if b is None:
            raise ValueError("the second value cannot be None")
        return self._compare(a, b)


def _integer_dup(name: str, low: int, high: int) -> Duplicator:
    def dup(value: Any) -> int:
        if not isinstance(value, int):
            raise TypeError(f"{name} value must be an integer, not {type(value).__name__}")
        result = int(value)
        if not low <= result <= high:
            raise OverflowError(f"{result} does not fit in {name}")
        return result

    return dup


def _signed_bounds(size: int) -> tuple[int, int]:
    bits = size * 8
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def _dup_char(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"char value must be a str, not {type(value).__name__}")
    if len(value) != 1:
        raise ValueError("char value must be a single character")
    return value


def _compare_char(a: str, b: str) -> int:
    return _natural_compare(ord(a), ord(b))


def _dup_bool(value: Any) -> bool:
    if not isinstance(value, int):
        raise TypeError(f"bool value must be a bool, not {type(value).__name__}")
    return bool(value)


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _check_real(name: str, value: Any) -> float:
    if not isinstance(value, (int, float)):
        raise TypeError(f"{name} value must be a number, not {type(value).__name__}")
    return float(value)


def _dup_float(value: Any) -> float:
    number = _check_real("float", value)
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        return float("inf") if number > 0 else float("-inf")


def _dup_double(value: Any) -> float:
    return _check_real("double", value)


def _format_general(value: float) -> str:
    return f"{value:g}"


def _dup_string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"string value must be a str, not {type(value).__name__}")
    return str(value)


_INT_SIZE = struct.calcsize("i")
_LONG_SIZE = struct.calcsize("l")
_SIZE_T_SIZE = struct.calcsize("N")

_INT_TYPE = CType(
    "int",
    _INT_SIZE,
    dup=_integer_dup("int", *_signed_bounds(_INT_SIZE)),
    format=str,
    compare=_natural_compare,
)
_LONG_TYPE = CType(
    "long",
    _LONG_SIZE,
    dup=_integer_dup("long", *_signed_bounds(_LONG_SIZE)),
    format=str,
    compare=_natural_compare,
)
_CHAR_TYPE = CType(
    "char",
    struct.calcsize("c"),
    dup=_dup_char,
    format=str,
    compare=_compare_char,
)
_BOOL_TYPE = CType(
    "bool",
    struct.calcsize("?"),
    dup=_dup_bool,
    format=_format_bool,
    compare=_natural_compare,
)
_SIZE_T_TYPE = CType(
    "size_t",
    _SIZE_T_SIZE,
    dup=_integer_dup("size_t", 0, (1 << (_SIZE_T_SIZE * 8)) - 1),
    format=str,
    compare=_natural_compare,
)
_FLOAT_TYPE = CType(
    "float",
    struct.calcsize("f"),
    dup=_dup_float,
    format=_format_general,
    compare=_natural_compare,
)
_DOUBLE_TYPE = CType(
    "double",
    struct.calcsize("d"),
    dup=_dup_double,
    format=_format_general,
    compare=_natural_compare,
)
_STRING_TYPE = CType(
    "string",
    struct.calcsize("P"),
    dup=_dup_string,
    format=str,
    compare=_natural_compare,
)


def ctype_int() -> CType:
    """Shared descriptor for native signed integers."""
    return _INT_TYPE


def ctype_long() -> CType:
    """Shared descriptor for native long integers."""
    return _LONG_TYPE


def ctype_char() -> CType:
    """Shared descriptor for single characters."""
    return _CHAR_TYPE


def ctype_bool() -> CType:
    """Shared descriptor for booleans, shown as ``true``/``false``."""
    return _BOOL_TYPE


def ctype_size_t() -> CType:
    """Shared descriptor for unsigned sizes and indices."""
    return _SIZE_T_TYPE


def ctype_float() -> CType:
    """Shared descriptor for single-precision floats."""
    return _FLOAT_TYPE


def ctype_double() -> CType:
    """Shared descriptor for double-precision floats."""
    return _DOUBLE_TYPE


def ctype_string() -> CType:
    """Shared descriptor for text strings."""
    return _STRING_TYPE