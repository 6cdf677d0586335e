"""wordnik_api.utils

Helpers shared across the wordnik_api package: query-string values, date
normalisation and text cleanup for display.
"""
from __future__ import annotations

import html
import re
import unicodedata
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple, Union

from .exceptions import InvalidDateError

__all__ = [
    "to_query_value",
    "encode_params",
    "normalize_date",
    "clean_text",
]


_date_re = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_tag_re = re.compile(r"<[^>]+>")


def to_query_value(value: Any) -> str:
    """Render one parameter value the way the service expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return ",".join(to_query_value(v) for v in value)
    return str(value)


def encode_params(params: Mapping[str, Any]) -> List[Tuple[str, str]]:
    """Return ``(name, value)`` pairs in mapping order, skipping ``None`` values."""
    return [(key, to_query_value(value)) for key, value in params.items() if value is not None]


def normalize_date(value: Union[str, date, datetime, None]) -> Optional[str]:
    """Return *value* as a ``yyyy-MM-dd`` string, or None when no date is given.

    Aware datetimes are converted to UTC first. Strings are only checked
    against the pattern, never parsed.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        if not _date_re.fullmatch(value):
            raise InvalidDateError(f"Invalid date format {value!r}, should be yyyy-MM-dd")
        return value
    raise TypeError(f"date must be a str, date or datetime, not {type(value).__name__}")


def clean_text(s: str) -> str:
    """Drop inline markup, unescape entities, replace smart quotes/dashes, collapse whitespace."""
    if not isinstance(s, str):
        return ""
    t = html.unescape(_tag_re.sub("", s))
    t = unicodedata.normalize("NFKC", t)
    for orig, repl in [
        ("\u2013", "-"),  # en-dash
        ("\u2014", "-"),  # em-dash
        ("\u201C", '"'), ("\u201D", '"'),
        ("\u2018", "'"), ("\u2019", "'"),
    ]:
        t = t.replace(orig, repl)
    return " ".join(t.split())
