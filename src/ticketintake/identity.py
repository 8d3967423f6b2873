"""Summary: Sender identity resolution.

Importance: Normalizes free-form sender fields into a display name and address.
Alternatives: Use email.utils.parseaddr and accept its stricter parsing.
"""

from __future__ import annotations

import re


_NAMED_ADDRESS = re.compile(r"^(.*?)\s*<(.+)>$")

DEFAULT_AVATAR_TEMPLATE = (
    "https://images.pexels.com/photos/{photo_id}/pexels-photo-{photo_id}.jpeg"
    "?auto=compress&cs=tinysrgb&w=60"
)


def resolve_sender(value: str) -> tuple[str, str]:
    """Summary: Extract a display name and email address from a sender value.

    Importance: Lets tickets show a readable name for both "Name <addr>" and bare addresses.
    Alternatives: Store the sender string verbatim.
    """

    match = _NAMED_ADDRESS.match(value)
    if match:
        return match.group(1).strip(), match.group(2).strip()
    return value.split("@", 1)[0], value


def avatar_reference(index: int, template: str = DEFAULT_AVATAR_TEMPLATE) -> str:
    """Summary: Build a deterministic avatar reference for a batch row.

    Importance: Gives every imported sender a stable placeholder image.
    Alternatives: Derive avatars from a Gravatar hash of the address.
    """

    photo_id = 1000000 + (index % 100000)
    return template.format(photo_id=photo_id, index=index)
