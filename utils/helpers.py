"""Helper utility functions."""

from typing import Any, Dict, Iterable


def serialize_document(document: Dict[str, Any], exclude: Iterable[str] = ()) -> Dict[str, Any]:
    """Return a JSON-safe copy of a MongoDB document.

    ``_id`` is converted to a string and any keys in ``exclude`` are dropped.
    """
    data = {key: value for key, value in document.items() if key not in exclude}
    if "_id" in data:
        data["_id"] = str(data["_id"])
    return data


def format_response(message: str, success: bool = True, **extra: Any) -> Dict[str, Any]:
    """Standard ``{success, message}`` response body."""
    return {"success": success, "message": message, **extra}
