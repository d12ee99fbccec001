from __future__ import annotations

from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from ..errors import InvalidLinkError

# Tokens of this length or shorter are treated as absent.
MIN_TOKEN_LENGTH = 10


def _usable(candidate: str) -> Optional[str]:
    candidate = candidate.strip()
    return candidate if len(candidate) > MIN_TOKEN_LENGTH else None


def token_from_address(address: Optional[str]) -> Optional[str]:
    """Extract a calendar token from an entry address.

    The fragment is consulted first, then the path without its leading slash.
    """

    if not address:
        return None
    parts = urlsplit(address)
    token = _usable(parts.fragment)
    if token:
        return token
    return _usable(parts.path[1:] if parts.path.startswith("/") else parts.path)


def token_from_link(text: str) -> str:
    """Extract a token from a pasted link or raw identifier.

    Raises :class:`InvalidLinkError` when nothing usable remains.
    """

    candidate = text.strip()
    if not candidate:
        raise InvalidLinkError("Paste a share link or calendar ID first.")
    if "#" in candidate:
        candidate = candidate.split("#")[-1]
    elif "/" in candidate:
        candidate = candidate.split("/")[-1]
    token = _usable(candidate)
    if token is None:
        raise InvalidLinkError("That does not look like a valid share link.")
    return token


def split_public_url(public_url: str) -> tuple[str, str]:
    """Return the ``(origin, path)`` pair of the configured public URL."""

    parts = urlsplit(public_url)
    origin = urlunsplit((parts.scheme, parts.netloc, "", "", ""))
    return origin, parts.path or "/"


def build_share_link(origin: str, path: str, token: str) -> str:
    return f"{origin}{path}#{token}"


def address_for_token(public_url: str, token: Optional[str]) -> str:
    origin, path = split_public_url(public_url)
    if not token:
        return f"{origin}{path}"
    return build_share_link(origin, path, token)
