from dataclasses import dataclass
from typing import Optional

from .resolver import SERVICES, match_service

PREVIEW = "preview"
EMPTY = "empty"
NO_PREVIEW = "no_preview"

# Permissions granted to the iframe that shows the embed URL
IFRAME_ALLOW = "accelerometer; autoplay; encrypted-media; gyroscope; picture-in-picture"
IFRAME_ALLOW_FULLSCREEN = True

SHARE_LINK_HELP_URL = (
    "https://support.airtable.com/hc/en-us/articles/"
    "205752117-Creating-a-base-share-link-or-a-view-share-link"
)
REQUEST_SERVICE_URL = "https://airtable.com/shrQSwIety6rqfJZX"


@dataclass(frozen=True)
class PreviewResult:
    status: str
    message: Optional[str] = None
    url: Optional[str] = None
    service: Optional[str] = None

    @property
    def has_preview(self) -> bool:
        return self.status == PREVIEW


def build_preview(cell_value: Optional[str], field_name: str) -> PreviewResult:
    """
    Decide what to show for a cell's text.

    Args:
        cell_value: The cell rendered as a string by the host
        field_name: Name of the field the value came from, used in messages

    Returns:
        PreviewResult with status preview, empty or no_preview
    """
    if not cell_value:
        return PreviewResult(status=EMPTY, message=f"The “{field_name}” field is empty")

    matched = match_service(cell_value)
    if matched is None:
        return PreviewResult(status=NO_PREVIEW, message="No preview")

    service, url = matched
    return PreviewResult(status=PREVIEW, url=url, service=service.key)


def supported_services_text() -> str:
    """Service list shown in the "Supported services" dialog."""
    share_links, *others = SERVICES
    names = sorted(s.name for s in others)
    return ", ".join([share_links.name] + names)
