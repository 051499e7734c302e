import time

from fastapi import APIRouter, Request

from dependencies import AppSettings

router = APIRouter()

@router.get("/status")
def status(request: Request, settings: AppSettings):
    now = time.time()
    return {
        "status": "ok",
        "environment": settings.APP_ENV,
        "uptime": round(now - request.app.state.started_at, 3),
        "timestamp": int(now * 1000),
    }
