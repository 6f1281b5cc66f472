import re
from typing import Optional

VIDEO_RE = re.compile(r"vimeo\.com/([\w-]+)(\?|\Z)", re.ASCII)


def preview_url(url: str) -> Optional[str]:
    match = VIDEO_RE.search(url)
    if match:
        return f"https://player.vimeo.com/video/{match.group(1)}"
    return None
