"""Text forms accepted by :class:`exactrat.Rational`.

Three shapes are understood:

* fraction text, ``"-2/3"``: two integer literals around a single ``/``;
* decimal text, ``"2.3"``, ``".23"``, ``"-0.5"``: the digits with the point
  removed form the numerator and the denominator is ``10`` raised to the
  number of digits after the point;
* integer text, ``"23"``.

The empty string stands for zero. The functions here only split text into an
unreduced ``(numerator, denominator)`` pair; reduction and the zero-denominator
check belong to the constructor.
"""
from __future__ import annotations

import logging
import re
from typing import Tuple

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"\s*[-+]?[0-9]+\s*\Z")
_DECIMAL_RE = re.compile(r"\s*(?P<sign>[-+]?)(?P<whole>[0-9]*)\.(?P<frac>[0-9]*)\s*\Z")

# Stays below the interpreter's int/str conversion digit limit (4300 by default).
_CHUNK_DIGITS = 4000
_CHUNK_BASE = 10**_CHUNK_DIGITS


def _int_to_str(value: int) -> str:
    """Render *value* in decimal, whatever its number of digits."""
    if -_CHUNK_BASE < value < _CHUNK_BASE:
        return str(value)
    sign = "-" if value < 0 else ""
    value = abs(value)
    chunks = []
    while value >= _CHUNK_BASE:
        value, chunk = divmod(value, _CHUNK_BASE)
        chunks.append(str(chunk).zfill(_CHUNK_DIGITS))
    chunks.append(str(value))
    return sign + "".join(reversed(chunks))


def _str_to_int(text: str) -> int:
    """Parse a validated integer literal, whatever its number of digits."""
    text = text.strip()
    if len(text) <= _CHUNK_DIGITS:
        return int(text)
    sign = -1 if text[0] == "-" else 1
    digits = text.lstrip("+-")
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start:start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return sign * value


def parse_integer(text: str) -> int:
    """Parse an integer literal such as ``"-12"``."""
    if not _INTEGER_RE.match(text):
        logger.debug("rejected integer literal %r", text)
        raise ValueError(f"invalid integer literal: {text!r}")
    return _str_to_int(text)


def parse_decimal(text: str) -> Tuple[int, int]:
    """Parse decimal text such as ``"-2.35"`` into ``(-235, 100)``."""
    match = _DECIMAL_RE.match(text)
    if match is None or not (match["whole"] or match["frac"]):
        logger.debug("rejected decimal literal %r", text)
        raise ValueError(f"invalid decimal literal: {text!r}")
    digits = match["whole"] + match["frac"]
    return _str_to_int(match["sign"] + digits), 10 ** len(match["frac"])


def parse_rational(text: str) -> Tuple[int, int]:
    """Split *text* into an unreduced ``(numerator, denominator)`` pair."""
    if not text.strip():
        return 0, 1
    if "/" in text:
        parts = text.split("/")
        if len(parts) != 2:
            logger.debug("rejected fraction literal %r", text)
            raise ValueError(f"invalid fraction literal: {text!r}")
        return parse_integer(parts[0]), parse_integer(parts[1])
    if "." in text:
        return parse_decimal(text)
    return parse_integer(text), 1


__all__ = ["parse_integer", "parse_decimal", "parse_rational"]
