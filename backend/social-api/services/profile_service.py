from __future__ import annotations
from typing import Optional

from loguru import logger
from sqlalchemy.orm import Session

from common.errors import ApiException
from models.profile import Profile
from schemas.profile_schema import ProfileUpsert
from utils import validators

NO_PROFILE = {"error": "There is no profile for this user."}


class ProfileService:

    # Profile 조회 (user_id 기준)
    def get_profile(self, db: Session, user_id: int) -> Optional[Profile]:
        logger.info("[ProfileService] Method : get_profile")
        return db.query(Profile).filter(Profile.user_id == user_id).first()

    def require_profile(self, db: Session, user_id: int) -> Profile:
        profile = self.get_profile(db, user_id)
        if not profile:
            raise ApiException(404, NO_PROFILE)
        return profile

    # Profile 생성/수정
    def upsert_profile(self, db: Session, user_id: int, payload: ProfileUpsert) -> Profile:
        logger.info("[ProfileService] Method : upsert_profile")
        errors = validators.profile(payload.model_dump())
        if errors:
            raise ApiException(400, errors)

        profile = self.get_profile(db, user_id)
        if profile is None:
            profile = Profile(user_id=user_id)
            db.add(profile)

        profile.first_name = payload.first_name.strip()
        profile.last_name = payload.last_name.strip()
        profile.profile_picture = payload.profile_picture or None
        if payload.bio is not None:
            profile.bio = payload.bio

        db.commit()
        db.refresh(profile)
        return profile
