from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .shaping import unwrap_list

MUC_SERVICE_PREFIX = "conference."


def muc_service(client) -> str:
    return f"{MUC_SERVICE_PREFIX}{client.host}"


def _room(client, name: str) -> dict[str, Any]:
    return {"name": name, "service": muc_service(client)}


def create_room(client, name: str) -> None:
    client.send_request("create_room", {**_room(client, name), "host": client.host})


def delete_room(client, name: str) -> None:
    client.send_request("destroy_room", {**_room(client, name), "host": client.host})


def get_online_rooms(client) -> list[str]:
    data = client.send_request("muc_online_rooms", {"host": client.host})
    return [str(r) for r in unwrap_list(data, "rooms", "room")]


def set_room_option(client, name: str, option: str, value: Any) -> None:
    if isinstance(value, bool):
        value = "true" if value else "false"
    client.send_request("change_room_option", {**_room(client, name), "option": option, "value": str(value)})


def set_room_affiliation(client, name: str, jid: str, affiliation: str) -> None:
    client.send_request(
        "set_room_affiliation",
        {**_room(client, name), "jid": jid, "affiliation": affiliation},
    )


def invite_to_room(client, name: str, password: str, reason: str, users: Iterable[str]) -> None:
    client.send_request(
        "send_direct_invitation",
        {
            "room": f"{name}@{muc_service(client)}",
            "password": password,
            "reason": reason,
            "users": ":".join(users),
        },
    )
