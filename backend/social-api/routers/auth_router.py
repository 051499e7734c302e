from fastapi import APIRouter, Response

from dependencies import DB, CurrentUser, Auth, AppSettings
from schemas.auth_schema import RegisterRequest, LoginRequest, LoginResponse, UserOut

router = APIRouter()

SESSION_COOKIE = "token"

# 회원가입
@router.post("/register", response_model=UserOut)
def register(payload: RegisterRequest, db: DB, auth: Auth):
    return auth.register(db, payload)

# 로그인: 토큰 반환 + 대시보드용 세션 쿠키
@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, response: Response, db: DB, auth: Auth, settings: AppSettings):
    token = auth.login(db, payload)
    response.set_cookie(
        key=SESSION_COOKIE,
        value=token.split(" ", 1)[-1],
        httponly=True,
        secure=not settings.is_development,
        max_age=settings.JWT_EXP_SECONDS,
        path="/",
        samesite="lax",
    )
    return LoginResponse(success=True, token=token)

@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(key=SESSION_COOKIE, path="/")
    return {"success": True}

@router.get("/current", response_model=UserOut)
def current(user: CurrentUser):
    return user
