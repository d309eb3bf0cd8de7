import logging
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import ValidationError

from ytproxy.config.settings import UpstreamConfig
from ytproxy.core.errors import UpstreamFailure, UpstreamRateLimited
from ytproxy.models.upstream import CheckDatabaseReply, ConvertReply, UpstreamReply, VideoDataReply

logger = logging.getLogger(__name__)

ReplyT = TypeVar("ReplyT", bound=UpstreamReply)


class ConverterClient:
    """
    JSON-over-HTTPS client for the conversion service.
    Every endpoint takes a JSON body and answers with a JSON object
    carrying a ``success`` flag.
    """

    def __init__(self, client: httpx.AsyncClient, config: UpstreamConfig):
        self.client = client
        self.config = config

    @classmethod
    def build(cls, config: UpstreamConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> "ConverterClient":
        """Create a client with the configured headers, TLS policy and timeout"""
        client = httpx.AsyncClient(
            base_url=config.base_url,
            headers=config.headers,
            verify=config.verify_ssl,
            timeout=config.timeout_seconds,
            follow_redirects=True,
            transport=transport,
        )
        return cls(client, config)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _post(self, path: str, payload: Dict[str, Any], reply_model: Type[ReplyT]) -> ReplyT:
        try:
            resp = await self.client.post(path, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Upstream request to {path} failed: {e!r}")
            raise UpstreamFailure("error.upstream_unreachable", reason=str(e) or type(e).__name__)

        if resp.status_code == 429:
            raise UpstreamRateLimited(self.config.retry_after_seconds)
        if resp.is_error:
            logger.error(f"Upstream {path} returned HTTP {resp.status_code}")
            raise UpstreamFailure("error.upstream_status", status=resp.status_code)

        # an unreadable body reads as an unsuccessful reply
        try:
            return reply_model.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            logger.warning(f"Upstream {path} sent an unreadable body: {str(e)[:200]}")
            return reply_model()

    async def check_database(self, youtube_id: str, quality: int) -> CheckDatabaseReply:
        """Look up an already converted file"""
        return await self._post(
            self.config.check_path,
            {"youtube_id": youtube_id, "quality": quality},
            CheckDatabaseReply,
        )

    async def get_video_data(self, url: str) -> VideoDataReply:
        """Fetch video metadata (title)"""
        return await self._post(
            self.config.video_data_path,
            {"url": url, "token": self.config.token},
            VideoDataReply,
        )

    async def download_video(self, url: str, quality: int, title: Optional[str], format_value: int) -> ConvertReply:
        """Request conversion and get a download link"""
        return await self._post(
            self.config.convert_path,
            {"url": url, "quality": quality, "title": title, "formatValue": format_value},
            ConvertReply,
        )

    async def insert_to_database(
        self,
        youtube_id: str,
        server_path: str,
        quality: int,
        title: Optional[str],
        format_value: int
    ) -> UpstreamReply:
        """Record a finished conversion in the upstream cache"""
        return await self._post(
            self.config.record_path,
            {
                "youtube_id": youtube_id,
                "server_path": server_path,
                "quality": quality,
                "title": title,
                "formatValue": format_value,
            },
            UpstreamReply,
        )
