from datetime import datetime, timezone
from typing import Any, Optional, Sequence


def now_iso_str() -> str:
    dt = datetime.now(tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def count_items(payload: Any, path: Sequence[str]) -> int:
    """Length of the list found at ``path`` inside a JSON payload, 0 if absent."""
    node: Optional[Any] = payload
    for key in path:
        if not isinstance(node, dict):
            return 0
        node = node.get(key)
    if isinstance(node, list):
        return len(node)
    return 0


def error_details(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__
