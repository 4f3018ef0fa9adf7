"""User groups reported by the API (`author_group`).

The API identifies a user's tier with an integer code. Each known code has
a display name and a color used by the website; an unknown code is a data
contract violation and surfaces as `ValueError` from `UserGroup(code)`.
"""

from __future__ import annotations

from enum import IntEnum


class UserGroup(IntEnum):
    """Integer-coded user tier."""

    GREEN = 0
    ORANGE = 1
    BROWN = 2
    ADMIN = 5
    BANNED = 1001
    DELETED = 1002
    CLIENT = 2001

    @property
    def display_name(self) -> str:
        """Polish label shown on the website."""

        return _NAMES[self]

    @property
    def color(self) -> str:
        """Hex color used to render the author's login."""

        return _COLORS[self]


_NAMES: dict[UserGroup, str] = {
    UserGroup.GREEN: "Zielony",
    UserGroup.ORANGE: "Pomarańczowy",
    UserGroup.BROWN: "Bordowy",
    UserGroup.ADMIN: "Administrator",
    UserGroup.BANNED: "Zbanowany",
    UserGroup.DELETED: "Usunięty",
    UserGroup.CLIENT: "Klient",
}

# ORANGE shares GREEN's color in the published table.
_COLORS: dict[UserGroup, str] = {
    UserGroup.GREEN: "#339933",
    UserGroup.ORANGE: "#339933",
    UserGroup.BROWN: "#BB0000",
    UserGroup.ADMIN: "#000000",
    UserGroup.BANNED: "#999999",
    UserGroup.DELETED: "#999999",
    UserGroup.CLIENT: "#3F6FA0",
}
