import functools
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request
from ytproxy.core.errors import ProxyError, UpstreamFailure
from ytproxy.core.logging import log_error, log_info
from ytproxy.i18n import i18n
from ytproxy.models.request import DownloadQuery
from ytproxy.models.response import DownloadResponse, ErrorResponse, FailureResponse, RateLimitedResponse
from ytproxy.services.conversion import ConversionService
from ytproxy.utils.locale import get_locale, safe_url_for_log

router = APIRouter()

def get_conversion_service(request: Request) -> ConversionService:
    return request.app.state.conversion_service

@router.get(
    "/api/download",
    response_model=DownloadResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        429: {"model": RateLimitedResponse},
        500: {"model": FailureResponse},
    },
)
async def download(
    request: Request,
    url: Optional[str] = Query(None, description="YouTube video URL"),
    output_type: Optional[str] = Query(None, alias="type", description="mp3 or mp4"),
    quality: Optional[str] = Query(None, description="Audio kbps or video height"),
    service: ConversionService = Depends(get_conversion_service),
):
    """Resolve a short-lived download link for a YouTube video"""

    config = request.app.state.config
    locale = get_locale(request.headers.get("accept-language"), config.i18n)
    _ = functools.partial(i18n.get, locale=locale)

    conversion = DownloadQuery(url=url, type=output_type, quality=quality).to_request()
    safe_url = safe_url_for_log(conversion.url, debug=config.logging.level == "DEBUG")
    log_info(
        request,
        f"Converting {safe_url} ({conversion.video_id}) to {conversion.output_type.value} at {conversion.quality}"
    )

    try:
        result = await service.convert(conversion)
    except ProxyError:
        raise
    except Exception as e:
        log_error(request, f"Conversion error: {str(e)}")
        raise UpstreamFailure(message=str(e) or None)

    log_info(request, f"Download link ready for {conversion.video_id} (cached={result.cached})")
    return DownloadResponse(
        type=conversion.output_type.value,
        quality=conversion.quality,
        title=result.title,
        download_url=result.download_url,
        info=_("response.expiry_notice"),
    )
