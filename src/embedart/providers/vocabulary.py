"""Name tokens that identify the role of an embedded image.

Matching is a case-insensitive substring test against an attachment's file
name or an embedded stream's comment. Token order carries no priority: the
matcher scans candidates in container order and stops at the first one
containing any token.
"""

from __future__ import annotations

from types import MappingProxyType

from embedart.domain import ImageRole

PRIMARY_IMAGE_NAMES: tuple[str, ...] = ("poster", "folder", "cover", "default")
BACKDROP_IMAGE_NAMES: tuple[str, ...] = ("backdrop", "fanart", "background", "art")
LOGO_IMAGE_NAMES: tuple[str, ...] = ("logo",)

ROLE_IMAGE_NAMES = MappingProxyType(
    {
        ImageRole.PRIMARY: PRIMARY_IMAGE_NAMES,
        ImageRole.BACKDROP: BACKDROP_IMAGE_NAMES,
        ImageRole.LOGO: LOGO_IMAGE_NAMES,
    }
)


def get_image_names(role: ImageRole) -> tuple[str, ...]:
    """Return the name tokens for a role, defaulting to the primary set."""
    return ROLE_IMAGE_NAMES.get(role, PRIMARY_IMAGE_NAMES)


def contains_any_name(text: str, names: tuple[str, ...]) -> bool:
    """Return True if text contains any of the names, ignoring case."""
    folded = text.casefold()
    return any(name.casefold() in folded for name in names)
