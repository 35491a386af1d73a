from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .shaping import merge_pairs, unwrap_list

# ejabberd expects a literal backslash-n between displayed groups
DISPLAY_SEPARATOR = "\\n"


def create_group(
        client,
        group: str,
        name: str,
        description: str = "",
        display: Iterable[str] = (),
) -> None:
    client.send_request(
        "srg_create",
        {
            "group": group,
            "host": client.host,
            "name": name,
            "description": description,
            "display": DISPLAY_SEPARATOR.join(display),
        },
    )


def delete_group(client, group: str) -> None:
    client.send_request("srg_delete", {"group": group, "host": client.host})


def get_groups(client) -> list[str]:
    data = client.send_request("srg_list", {"host": client.host})
    return [str(g) for g in unwrap_list(data, "groups", "id")]


def get_group_info(client, group: str) -> dict[str, Any]:
    data = client.send_request("srg_get_info", {"group": group, "host": client.host})
    info: dict[str, Any] = {}
    for entry in unwrap_list(data, "informations", "information"):
        pair = merge_pairs(entry)
        if "key" in pair:
            info[str(pair["key"])] = pair.get("value")
    return info


def get_group_members(client, group: str) -> list[str]:
    data = client.send_request("srg_get_members", {"group": group, "host": client.host})
    return [str(m) for m in unwrap_list(data, "members", "member")]


def add_user_to_group(client, user: str, group: str) -> None:
    client.send_request(
        "srg_user_add",
        {"user": user, "host": client.host, "group": group, "grouphost": client.host},
    )


def delete_user_from_group(client, user: str, group: str) -> None:
    client.send_request(
        "srg_user_del",
        {"user": user, "host": client.host, "group": group, "grouphost": client.host},
    )
