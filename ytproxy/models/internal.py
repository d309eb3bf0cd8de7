from enum import Enum
from pydantic import BaseModel
from typing import Optional, Tuple
from ytproxy.services.quality import (
    AUDIO_FORMAT_CODE,
    AUDIO_QUALITIES,
    DEFAULT_AUDIO_QUALITY,
    DEFAULT_VIDEO_QUALITY,
    VIDEO_FORMAT_CODE,
    VIDEO_QUALITIES,
    get_audio_quality_value,
    get_video_quality_value,
)

class OutputType(str, Enum):
    """Requested output container: mp3 is audio, mp4 is video"""
    MP3 = "mp3"
    MP4 = "mp4"

    @property
    def is_audio(self) -> bool:
        return self is OutputType.MP3

    @property
    def format_code(self) -> int:
        return AUDIO_FORMAT_CODE if self.is_audio else VIDEO_FORMAT_CODE

    @property
    def valid_qualities(self) -> Tuple[str, ...]:
        return AUDIO_QUALITIES if self.is_audio else VIDEO_QUALITIES

    @property
    def default_quality(self) -> str:
        return DEFAULT_AUDIO_QUALITY if self.is_audio else DEFAULT_VIDEO_QUALITY

    def quality_code(self, quality: str) -> int:
        if self.is_audio:
            return get_audio_quality_value(quality)
        return get_video_quality_value(quality)

class ConversionRequest(BaseModel):
    """Validated conversion request (separated from HTTP concerns)"""
    url: str
    video_id: str
    output_type: OutputType
    quality: str

    @property
    def quality_code(self) -> int:
        return self.output_type.quality_code(self.quality)

    @property
    def format_code(self) -> int:
        return self.output_type.format_code

class ConversionResult(BaseModel):
    """Download link obtained from the conversion service"""
    download_url: str
    title: Optional[str] = None
    cached: bool = False
    expiring: bool = True
