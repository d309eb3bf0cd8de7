import re
from typing import Optional

# watch?v=, &v=, youtu.be/, /embed/, /v/, /watch/, /shorts/ and /<seg>/<...>/ shapes
YOUTUBE_ID_PATTERN = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|embed|watch|shorts)/|.*[?&]v=)|youtu\.be/)"
    r"([a-zA-Z0-9_-]{11})(?:[&?]|$)"
)


def extract_video_id(url: str) -> Optional[str]:
    """Return the 11-character video id of a YouTube URL, or None"""
    match = YOUTUBE_ID_PATTERN.search(url)
    return match.group(1) if match else None
