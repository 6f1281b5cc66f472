"""
Resolve cell text into an embeddable preview URL.

Each supported service has a recognizer in ``urlpreview.services`` that
returns an embed URL or None. Recognizers are tried in SERVICES order and the
first match wins, so a string that mentions several services resolves to the
earliest one in the list.
"""

from typing import Callable, NamedTuple, Optional, Tuple

from .services import airtable, figma, soundcloud, spotify, vimeo, youtube


class Service(NamedTuple):
    key: str
    name: str
    recognizer: Callable[[str], Optional[str]]


SERVICES: Tuple[Service, ...] = (
    Service("airtable", "Airtable share links", airtable.preview_url),
    Service("youtube", "YouTube", youtube.preview_url),
    Service("vimeo", "Vimeo", vimeo.preview_url),
    Service("spotify", "Spotify", spotify.preview_url),
    Service("soundcloud", "SoundCloud", soundcloud.preview_url),
    Service("figma", "Figma", figma.preview_url),
)


def match_service(candidate: Optional[str]) -> Optional[Tuple[Service, str]]:
    """
    Find the first service that recognizes the candidate.

    Args:
        candidate: Raw cell text; may be empty, None or not a URL at all

    Returns:
        (service, embed_url) for the first match, or None
    """
    if not candidate:
        return None
    for service in SERVICES:
        preview_url = service.recognizer(candidate)
        if preview_url:
            return service, preview_url
    return None


def resolve_preview_url(candidate: Optional[str]) -> Optional[str]:
    """Return the embed URL for the candidate, or None when no service matches."""
    matched = match_service(candidate)
    if matched is None:
        return None
    return matched[1]
