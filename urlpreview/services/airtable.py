import re
from typing import Optional

SHARE_RE = re.compile(r"airtable\.com(/embed)?/(shr[A-Za-z0-9]{14}.*)")


def preview_url(url: str) -> Optional[str]:
    """Embed URL for an Airtable base or view share link."""
    match = SHARE_RE.search(url)
    if match:
        return f"https://airtable.com/embed/{match.group(2)}"
    return None
