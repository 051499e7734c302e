from fastapi import APIRouter

from dependencies import DB, CurrentUser
from schemas.profile_schema import ProfileOut, ProfileUpsert
from services.profile_service import ProfileService

router = APIRouter()
profile_service = ProfileService()

# 내 프로필 조회
@router.get("/", response_model=ProfileOut)
def get_my_profile(db: DB, user: CurrentUser):
    return profile_service.require_profile(db, user.id)

# 내 프로필 생성/수정
@router.post("/", response_model=ProfileOut)
def upsert_my_profile(payload: ProfileUpsert, db: DB, user: CurrentUser):
    return profile_service.upsert_profile(db, user.id, payload)

# 프로필 조회 By USER ID
@router.get("/user/{user_id}", response_model=ProfileOut)
def get_profile_by_user(user_id: int, db: DB):
    return profile_service.require_profile(db, user_id)
