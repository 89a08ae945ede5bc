from typing import Any, Dict, Iterable, List

from schema.common import Violation

_REQUEST_SOURCES = ("body", "query", "path", "header", "cookie")


def violation_field(loc: Iterable[Any]) -> str:
    """Return the dotted field name for a pydantic error location.

    The leading request source added by FastAPI (``body``, ``query``...) is
    dropped; a location pointing at the whole body reports ``body``.
    """
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in _REQUEST_SOURCES:
        parts = parts[1:]
    return ".".join(parts) or "body"


def collect_violations(errors: Iterable[Dict[str, Any]]) -> List[Violation]:
    """Turn a pydantic error list into ordered field violations

    Every error is kept; pydantic already reports all failing fields in
    declaration order. A body that is not valid JSON is reported on ``body``
    rather than on the character offset FastAPI puts in the location.
    """
    return [
        Violation(
            field="body" if err.get("type") == "json_invalid" else violation_field(err.get("loc", ())),
            message=err.get("msg", "Invalid value"),
        )
        for err in errors
    ]
