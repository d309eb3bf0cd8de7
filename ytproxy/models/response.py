from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DownloadResponse(BaseModel):
    """Successful conversion response"""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    type: str
    quality: str
    title: Optional[str] = None
    download_url: str = Field(..., alias="downloadUrl")
    info: str


class ErrorResponse(BaseModel):
    """Client error response"""
    error: str


class RateLimitedResponse(ErrorResponse):
    """Upstream throttling response"""
    retry_after: int = Field(..., alias="retryAfter")


class FailureResponse(ErrorResponse):
    """Server error response"""
    success: bool = False
