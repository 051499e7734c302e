from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from dependencies import DB, Auth
from routers.auth_router import SESSION_COOKIE
from services.profile_service import ProfileService

BASE_DIR = Path(__file__).resolve().parent.parent
TEMPLATES = Jinja2Templates(directory=str(BASE_DIR / "templates"))

router = APIRouter()
profile_service = ProfileService()


def _session_token(request: Request) -> Optional[str]:
    return request.cookies.get(SESSION_COOKIE) or request.headers.get("Authorization")


@router.get("/dashboard", response_class=HTMLResponse)
def dashboard(request: Request, db: DB, auth: Auth):
    state: Dict[str, Any] = {}
    try:
        user = auth.user_from_token(db, _session_token(request))
        profile = profile_service.get_profile(db, user.id) if user else None
        if profile is None:
            return RedirectResponse(url="/", status_code=303)
        state = {
            "first_name": profile.first_name,
            "last_name": profile.last_name,
            "profile_picture": profile.profile_picture,
        }
    except SQLAlchemyError as e:
        # 프로필 조회 실패 시 빈 상태로 렌더링
        logger.error("Dashboard profile lookup failed: {}", e)

    return TEMPLATES.TemplateResponse(request, "dashboard.html", state)
