from __future__ import annotations

from enum import Enum


class VCardField(str, Enum):
    FULLNAME = "FN"
    NICKNAME = "NICKNAME"
    BIRTHDAY = "BDAY"
    EMAIL = "EMAIL USERID"
    COUNTRY = "ADR CTRY"
    CITY = "ADR LOCALITY"
    DESCRIPTION = "DESC"
    AVATAR_URL = "EXTRA PHOTOURL"


def split_field(name: str) -> tuple[str, str | None]:
    """``"ADR CTRY"`` -> ``("ADR", "CTRY")``; single-word fields have no subname."""
    value = name.value if isinstance(name, VCardField) else str(name)
    parts = value.split(" ", 1)
    if len(parts) == 2:
        return parts[0], parts[1]
    return parts[0], None
