import re
from typing import Optional
from ..exceptions import InvalidFormat

ANCHOR_ID_MAX_LENGTH = 50
ANCHOR_ID_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9-]{0,49}$")


def anchor_id_error(anchor_id: str) -> Optional[str]:
    """Human-readable reason an anchor id is rejected, or None if it is fine."""
    if len(anchor_id) > ANCHOR_ID_MAX_LENGTH:
        return f"Anchor ID must be {ANCHOR_ID_MAX_LENGTH} characters or less"
    if not anchor_id[:1].isascii() or not anchor_id[:1].isalpha():
        return "Anchor ID must start with a letter"
    if not ANCHOR_ID_PATTERN.match(anchor_id):
        return "Anchor ID can only contain letters, numbers, and hyphens"
    return None


def clean_anchor_id(anchor_id: Optional[str]) -> Optional[str]:
    """
    Normalize an anchor id for storage.

    Blank input clears the anchor (returns None). Anything else must be a
    URL-fragment-safe token or InvalidFormat is raised.
    """
    if anchor_id is None:
        return None
    if not isinstance(anchor_id, str):
        raise InvalidFormat("Anchor ID must be a string")

    cleaned = anchor_id.strip()
    if not cleaned:
        return None

    error = anchor_id_error(cleaned)
    if error:
        raise InvalidFormat(error)
    return cleaned
