from __future__ import annotations

from typing import Any

from .shaping import merge_pairs, split_jid, unwrap_list


def get_roster_contacts(client, user: str) -> list[dict[str, Any]]:
    data = client.send_request("get_roster", {"user": user, "host": client.host})
    return [merge_pairs(contact) for contact in unwrap_list(data, "contacts", "contact")]


def add_roster_contact(
        client,
        user: str,
        contact: str,
        nickname: str,
        *,
        group: str = "",
        subscription: str = "both",
) -> None:
    contact_user, contact_host = split_jid(contact, client.host)
    client.send_request(
        "add_rosteritem",
        {
            "localuser": user,
            "localserver": client.host,
            "user": contact_user,
            "server": contact_host,
            "nick": nickname,
            "group": group,
            "subs": subscription,
        },
    )


def delete_roster_contact(client, user: str, contact: str) -> None:
    contact_user, contact_host = split_jid(contact, client.host)
    client.send_request(
        "delete_rosteritem",
        {
            "localuser": user,
            "localserver": client.host,
            "user": contact_user,
            "server": contact_host,
        },
    )
