from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional

from ecwid_catalog.domain.services.constants import FILTER_LIMIT, FILTER_OFFSET


def _to_query_value(value: Any) -> str:
    """
    Render one Python value the way Ecwid expects it in a query string.
    bool -> "true"/"false", datetime -> unix seconds, sequences -> comma list.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return str(int(value.timestamp()))
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(_to_query_value(v) for v in value)
    return str(value)


def build_filter(base: Optional[Mapping[str, str]] = None, **params: Any) -> Dict[str, str]:
    """
    Build a flat str -> str search filter.
    Keys are passed through untouched (Ecwid uses camelCase: priceFrom, inStock...);
    None values are dropped. No validation: the server rejects unknown keys/values.

    >>> build_filter(keyword="shoe", inStock=True, limit=20)
    {'keyword': 'shoe', 'inStock': 'true', 'limit': '20'}
    """
    out: Dict[str, str] = dict(base or {})
    for key, value in params.items():
        if value is None:
            continue
        out[key] = _to_query_value(value)
    return out


def with_page(filter: Optional[Mapping[str, str]], offset: int, limit: Optional[int] = None) -> Dict[str, str]:
    """Copy of `filter` positioned at `offset` (and `limit` if given)."""
    out = dict(filter or {})
    out[FILTER_OFFSET] = str(offset)
    if limit is not None:
        out[FILTER_LIMIT] = str(limit)
    return out
