from pydantic import BaseModel, Field
from typing import Optional
from ytproxy.core.errors import InputValidationError
from ytproxy.models.internal import ConversionRequest, OutputType
from ytproxy.utils.youtube import extract_video_id

class DownloadQuery(BaseModel):
    """Raw query parameters of GET /api/download"""
    url: Optional[str] = Field(None, description="YouTube video URL")
    type: Optional[str] = Field(None, description="Output type: mp3 or mp4 (default mp3)")
    quality: Optional[str] = Field(None, description="Audio kbps or video height (default 128 / 720)")

    def to_request(self) -> ConversionRequest:
        """
        Validate and convert to a conversion request.
        Checks run in order: url present, url recognized, type, quality.
        """
        if not self.url:
            raise InputValidationError("error.url_required")

        video_id = extract_video_id(self.url)
        if not video_id:
            raise InputValidationError("error.invalid_url")

        raw_type = OutputType.MP3.value if self.type is None else self.type.lower()
        try:
            output_type = OutputType(raw_type)
        except ValueError:
            raise InputValidationError(
                "error.invalid_type",
                options=", ".join(t.value for t in OutputType)
            )

        quality = output_type.default_quality if self.quality is None else self.quality
        if quality not in output_type.valid_qualities:
            key = "error.invalid_audio_quality" if output_type.is_audio else "error.invalid_video_quality"
            raise InputValidationError(key, options=", ".join(output_type.valid_qualities))

        return ConversionRequest(
            url=self.url,
            video_id=video_id,
            output_type=output_type,
            quality=quality
        )
