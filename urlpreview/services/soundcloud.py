from typing import Optional

PLAYER_URL = (
    "https://w.soundcloud.com/player/?url={url}"
    "&color=%23ff5500&auto_play=false&hide_related=false&show_comments=true"
    "&show_user=true&show_reposts=false&show_teaser=true"
)


def preview_url(url: str) -> Optional[str]:
    """Wrap any soundcloud.com link in the widget player.

    SoundCloud links have no stable shape, so the whole input is handed to the
    player as-is (no escaping).
    """
    if "soundcloud.com" in url:
        return PLAYER_URL.format(url=url)
    return None
