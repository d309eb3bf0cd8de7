"""Response shapes of the conversion service endpoints.

The service is undocumented; only the fields the proxy reads are modelled
and everything else is ignored.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UpstreamReply(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    success: Optional[bool] = None
    error: Optional[str] = None


class CheckDatabaseReply(UpstreamReply):
    download_link: Optional[str] = None


class VideoDataReply(UpstreamReply):
    title: Optional[str] = None


class ConvertReply(UpstreamReply):
    download_link: Optional[str] = None
    error_type: Optional[int] = Field(None, alias="errorType")
