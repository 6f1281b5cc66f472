import re
from typing import Optional

# Standard urls, e.g. https://www.youtube.com/watch?v=KYz2wyBy3kc
WATCH_RE = re.compile(r"youtube\.com/.*v=([\w-]+)(&|\Z)", re.ASCII)
# Shortened urls, e.g. https://youtu.be/KYz2wyBy3kc
SHORT_RE = re.compile(r"youtu\.be/([\w-]+)(\?|\Z)", re.ASCII)
# Playlists, e.g. https://www.youtube.com/playlist?list=PLx0sYbCqOb8TBPRdmBHs5Iftvv9TPboYG
PLAYLIST_RE = re.compile(r"youtube\.com/playlist\?.*list=([\w-]+)(&|\Z)", re.ASCII)


def preview_url(url: str) -> Optional[str]:
    match = WATCH_RE.search(url) or SHORT_RE.search(url)
    if match:
        return f"https://www.youtube.com/embed/{match.group(1)}"

    match = PLAYLIST_RE.search(url)
    if match:
        return f"https://www.youtube.com/embed/videoseries?list={match.group(1)}"

    return None
