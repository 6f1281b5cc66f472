import re
from typing import Optional

# Songs, albums, artists and playlists share one embed path
MUSIC_RE = re.compile(r"spotify\.com/(track|album|artist|playlist)/([\w-]+)(\?|\Z)", re.ASCII)
# Podcasts and episodes use the podcast player
PODCAST_RE = re.compile(r"spotify\.com/(show|episode)/([\w-]+)(\?|\Z)", re.ASCII)


def preview_url(url: str) -> Optional[str]:
    """Embed URL for a Spotify track, album, artist, playlist, show or episode."""
    match = MUSIC_RE.search(url)
    if match:
        return f"https://open.spotify.com/embed/{match.group(1)}/{match.group(2)}"

    match = PODCAST_RE.search(url)
    if match:
        return f"https://open.spotify.com/embed-podcast/{match.group(1)}/{match.group(2)}"

    return None
