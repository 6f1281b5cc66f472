import re
from typing import Optional

# Pattern recommended by Figma for embeddable file and prototype links.
# The unescaped dot in "figma.com" is kept as Figma publishes it.
FILE_RE = re.compile(
    r"(https://([\w.-]+\.)?)?figma.com/(file|proto)/([0-9a-zA-Z]{22,128})(?:/.*)?\Z",
    re.ASCII,
)


def preview_url(url: str) -> Optional[str]:
    if FILE_RE.search(url):
        return f"https://www.figma.com/embed?embed_host=astra&url={url}"
    return None
