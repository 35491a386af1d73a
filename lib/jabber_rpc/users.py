from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .errors import RpcError
from .shaping import merge_pairs, result_code, unwrap_list
from .vcard import VCardField, split_field

logger = logging.getLogger(__name__)


def _user(client, user: str) -> dict[str, Any]:
    return {"user": user, "host": client.host}


def create_user(client, user: str, password: str) -> None:
    client.send_request("register", {**_user(client, user), "password": password})


def check_account(client, user: str) -> bool:
    try:
        data = client.send_request("check_account", _user(client, user))
    except RpcError as exc:
        if exc.fault_code is not None:
            return False
        raise
    return result_code(data) == 0


def change_password(client, user: str, password: str) -> None:
    client.send_request("change_password", {**_user(client, user), "newpass": password})


def set_nickname(client, user: str, nickname: str) -> None:
    client.send_request("set_nickname", {**_user(client, user), "nickname": nickname})


def get_last_activity(client, user: str) -> Any:
    data = client.send_request("get_last", _user(client, user))
    if isinstance(data, dict) and "last_activity" in data:
        return data["last_activity"]
    return data


def unregister_user(client, user: str) -> None:
    client.send_request("unregister", _user(client, user))


def ban_account(client, user: str, reason: str) -> None:
    client.send_request("ban_account", {**_user(client, user), "reason": reason})


def send_message_chat(client, from_jid: str, to_jid: str, body: str) -> None:
    client.send_request("send_message_chat", {"from": from_jid, "to": to_jid, "body": body})


def send_message_headline(client, from_jid: str, to_jid: str, subject: str, body: str) -> None:
    client.send_request(
        "send_message_headline",
        {"from": from_jid, "to": to_jid, "subject": subject, "body": body},
    )


def set_status(
        client,
        user: str,
        show: str,
        status: str,
        *,
        priority: int = 7,
        resource: str = "",
) -> None:
    client.send_request(
        "set_presence",
        {
            **_user(client, user),
            "resource": resource,
            "type": "available",
            "show": show,
            "status": status,
            "priority": str(priority),
        },
    )


def get_user_sessions_info(client, user: str) -> list[dict[str, Any]]:
    data = client.send_request("user_sessions_info", _user(client, user))
    return [merge_pairs(session) for session in unwrap_list(data, "sessions_info", "session")]


def set_vcard(client, user: str, data: Mapping[VCardField | str, str]) -> None:
    for field, content in data.items():
        name, subname = split_field(field)
        if subname:
            client.send_request(
                "set_vcard2",
                {**_user(client, user), "name": name, "subname": subname, "content": content},
            )
        else:
            client.send_request("set_vcard", {**_user(client, user), "name": name, "content": content})


def get_vcard(client, user: str, fields: Iterable[VCardField] | None = None) -> dict[VCardField, str]:
    """Fetch vCard fields one by one; fields the server does not have are left out."""
    result: dict[VCardField, str] = {}
    for field in fields or VCardField:
        name, subname = split_field(field)
        params = {**_user(client, user), "name": name}
        if subname:
            params["subname"] = subname
        try:
            data = client.send_request("get_vcard2" if subname else "get_vcard", params)
        except RpcError as exc:
            logger.debug("vcard field %s unavailable for %s: %s", field.value, user, exc)
            continue
        content = data.get("content") if isinstance(data, dict) else data
        if content:
            result[field] = str(content)
    return result
