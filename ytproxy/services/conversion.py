import asyncio
import logging
from typing import Optional, Set

from ytproxy.config.settings import UpstreamConfig
from ytproxy.core.errors import UpstreamFailure, UpstreamRateLimited
from ytproxy.models.internal import ConversionRequest, ConversionResult
from ytproxy.services.upstream import ConverterClient

logger = logging.getLogger(__name__)


class ConversionService:
    """Conversion proxy orchestration"""

    def __init__(self, upstream: ConverterClient, config: UpstreamConfig):
        self.upstream = upstream
        self.config = config
        self._pending: Set[asyncio.Task] = set()

    async def convert(self, request: ConversionRequest) -> ConversionResult:
        """
        Obtain a download link for a validated request.

        1. Ask the upstream cache; a hit is returned as is.
        2. Fetch the video title.
        3. Request the conversion.
        4. Record the new link upstream without waiting for it.
        """
        quality_code = request.quality_code
        format_code = request.format_code

        cached = await self.upstream.check_database(request.video_id, quality_code)
        if cached.success and cached.download_link:
            logger.info(f"Cache hit for {request.video_id} (quality code {quality_code})")
            return ConversionResult(download_url=cached.download_link, cached=True)

        video_data = await self.upstream.get_video_data(request.url)
        if not video_data.success:
            if video_data.error:
                raise UpstreamFailure(message=video_data.error)
            raise UpstreamFailure("error.video_data_failed")

        title = video_data.title
        converted = await self.upstream.download_video(request.url, quality_code, title, format_code)
        if not converted.success:
            if converted.error_type == self.config.rate_limit_error_type:
                logger.warning(f"Conversion of {request.video_id} throttled upstream")
                raise UpstreamRateLimited(self.config.retry_after_seconds)
            if converted.error:
                raise UpstreamFailure(message=converted.error)
            raise UpstreamFailure("error.conversion_failed")

        if not converted.download_link:
            raise UpstreamFailure("error.conversion_failed")

        self.record_result(request, converted.download_link, title)
        return ConversionResult(download_url=converted.download_link, title=title)

    def record_result(self, request: ConversionRequest, download_link: str, title: Optional[str]) -> asyncio.Task:
        """Schedule the upstream record call; it is never awaited by the caller"""
        task = asyncio.create_task(
            self._record(request, download_link, title),
            name=f"record-{request.video_id}"
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _record(self, request: ConversionRequest, download_link: str, title: Optional[str]) -> None:
        try:
            await self.upstream.insert_to_database(
                request.video_id,
                download_link,
                request.quality_code,
                title,
                request.format_code
            )
        except Exception as e:
            logger.error(f"Recording result for {request.video_id} failed: {e}")

    async def wait_pending(self) -> None:
        """Wait for scheduled record calls to settle"""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def aclose(self) -> None:
        await self.wait_pending()
        await self.upstream.aclose()
