from __future__ import annotations

from typing import Any


def merge_pairs(items: Any) -> dict[str, Any]:
    """ejabberd encodes tuples as lists of one-key structs; fold them into one dict."""
    if isinstance(items, dict):
        return dict(items)
    out: dict[str, Any] = {}
    for item in items or []:
        if isinstance(item, dict):
            out.update(item)
    return out


def unwrap_list(data: Any, outer: str, inner: str) -> list[Any]:
    """``{"rooms": [{"room": "a"}, {"room": "b"}]}`` -> ``["a", "b"]``."""
    items = data.get(outer) if isinstance(data, dict) else data
    if not isinstance(items, list):
        return []
    return [item[inner] if isinstance(item, dict) and inner in item else item for item in items]


def split_jid(jid: str, default_host: str) -> tuple[str, str]:
    if "@" in jid:
        user, host = jid.split("@", 1)
        return user, host
    return jid, default_host


def result_code(data: Any) -> int | None:
    if isinstance(data, dict):
        data = data.get("res")
    if isinstance(data, bool):
        return int(data)
    if isinstance(data, int):
        return data
    return None
