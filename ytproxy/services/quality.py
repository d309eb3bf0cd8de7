"""Quality and format codes understood by the conversion service.

The upstream only accepts opaque integers. These tables translate the
user-facing labels (kbps for audio, vertical resolution for video).
"""

import re
from typing import Dict, Optional, Tuple

AUDIO_QUALITIES: Tuple[str, ...] = ("96", "128", "256", "320")
VIDEO_QUALITIES: Tuple[str, ...] = ("144", "360", "480", "720", "1080")

DEFAULT_AUDIO_QUALITY = "128"
DEFAULT_VIDEO_QUALITY = "720"

AUDIO_QUALITY_CODES: Dict[int, int] = {320: 0, 256: 1, 128: 4, 96: 5}
VIDEO_QUALITY_CODES: Dict[int, int] = {1080: 0, 720: 1, 480: 2, 360: 3, 144: 4}

DEFAULT_AUDIO_CODE = AUDIO_QUALITY_CODES[128]
DEFAULT_VIDEO_CODE = VIDEO_QUALITY_CODES[720]

AUDIO_FORMAT_CODE = 1
VIDEO_FORMAT_CODE = 2

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_quality(quality) -> Optional[int]:
    """Parse the leading integer of a quality label ("320", "320kbps", 720)"""
    if isinstance(quality, int):
        return quality
    match = _LEADING_INT.match(str(quality))
    return int(match.group(1)) if match else None


def get_audio_quality_value(quality) -> int:
    """Map an audio bitrate label to its upstream code (unknown -> 128 kbps)"""
    return AUDIO_QUALITY_CODES.get(parse_quality(quality), DEFAULT_AUDIO_CODE)


def get_video_quality_value(quality) -> int:
    """Map a video resolution label to its upstream code (unknown -> 720p)"""
    return VIDEO_QUALITY_CODES.get(parse_quality(quality), DEFAULT_VIDEO_CODE)
