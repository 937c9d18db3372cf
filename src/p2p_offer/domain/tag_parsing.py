"""Per-field tag parsers: parse a tag value or fall back to a documented default.

Absent tag -> default, silently.
Unparsable tag -> default plus a warning when the field degrades gracefully,
otherwise TagParseError, which aborts the whole decode.
"""

import logging
import re
from collections.abc import Callable
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import TypeVar

from src.p2p_common.datetime_utils import from_epoch
from src.p2p_common.errors import TagParseError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_INT_RE = re.compile(r"[+-]?0*\d{1,19}")
_INT_MIN, _INT_MAX = -(2**63), 2**63 - 1


def parse_int(tag: str, raw: str) -> int:
    """Signed 64-bit integer; anything longer or out of range is a parse failure."""
    if not _INT_RE.fullmatch(raw):
        raise TagParseError(tag, raw, "integer")
    value = int(raw)
    if not _INT_MIN <= value <= _INT_MAX:
        raise TagParseError(tag, raw, "integer")
    return value


def parse_decimal(tag: str, raw: str) -> Decimal:
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        raise TagParseError(tag, raw, "decimal") from None
    if not value.is_finite():
        raise TagParseError(tag, raw, "decimal")
    return value


def parse_or_default(
    tag: str,
    raw: str | None,
    parser: Callable[[str, str], T],
    default: T,
    *,
    lenient: bool = True,
) -> T:
    if raw is None:
        return default
    try:
        return parser(tag, raw)
    except TagParseError as exc:
        if not lenient:
            raise
        logger.warning("%s; using default %r", exc.message, default)
        return default


def parse_epoch(tag: str, raw: str) -> datetime:
    seconds = parse_int(tag, raw)
    try:
        return from_epoch(seconds)
    except (OverflowError, OSError, ValueError):
        raise TagParseError(tag, raw, "epoch timestamp") from None
