from fastapi import APIRouter, Request

from ytproxy.i18n import i18n

router = APIRouter()


@router.get("/")
async def root(request: Request):
    """Root endpoint"""
    config = request.app.state.config
    return {
        "status": i18n.get("response.status_running"),
        "service": config.api.title,
        "version": config.api.version,
    }


@router.get("/health")
async def health_check():
    """Lightweight health check"""
    return {"status": i18n.get("health.status")}
