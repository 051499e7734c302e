from __future__ import annotations
import hashlib
import hmac
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from loguru import logger
from sqlalchemy.orm import Session

from common.errors import ApiException
from models.user import User
from schemas.auth_schema import RegisterRequest, LoginRequest
from settings import Settings
from utils import validators

PBKDF2_ROUNDS = 260_000


def hash_password(password: str, salt: Optional[str] = None) -> str:
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), PBKDF2_ROUNDS)
    return f"pbkdf2_sha256${PBKDF2_ROUNDS}${salt}${digest.hex()}"


def verify_password(password: str, stored: str) -> bool:
    try:
        _, rounds, salt, digest = stored.split("$")
    except ValueError:
        return False
    candidate = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), int(rounds))
    return hmac.compare_digest(candidate.hex(), digest)


class AuthService:

    def __init__(self, settings: Settings):
        self.settings = settings

    def create_token(self, user_id: int) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + timedelta(seconds=self.settings.JWT_EXP_SECONDS),
        }
        return jwt.encode(payload, self.settings.JWT_SECRET, algorithm=self.settings.JWT_ALGORITHM)

    def decode_token(self, token: str) -> Optional[int]:
        if not self.settings.JWT_SECRET:
            return None
        try:
            payload = jwt.decode(token, self.settings.JWT_SECRET, algorithms=[self.settings.JWT_ALGORITHM])
        except jwt.InvalidTokenError as e:
            logger.debug("[AuthService] invalid token: {}", e)
            return None
        try:
            return int(payload["sub"])
        except (KeyError, TypeError, ValueError):
            return None

    def user_from_token(self, db: Session, token: Optional[str]) -> Optional[User]:
        if not token:
            return None
        if token.startswith("Bearer "):
            token = token.split("Bearer ", 1)[1]
        user_id = self.decode_token(token.strip())
        if user_id is None:
            return None
        return db.get(User, user_id)

    # 회원가입
    def register(self, db: Session, payload: RegisterRequest) -> User:
        logger.info("[AuthService] Method : register")
        errors = validators.register(payload.model_dump())
        if errors:
            raise ApiException(400, errors)

        email = payload.email.strip().lower()
        if db.query(User).filter(User.email == email).first():
            raise ApiException(400, {"email": "Email already exists."})

        user = User(email=email, password_hash=hash_password(payload.password))
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    # 로그인 -> "Bearer <jwt>"
    def login(self, db: Session, payload: LoginRequest) -> str:
        logger.info("[AuthService] Method : login")
        errors = validators.login(payload.model_dump())
        if errors:
            raise ApiException(400, errors)

        user = db.query(User).filter(User.email == payload.email.strip().lower()).first()
        if not user:
            raise ApiException(404, {"email": "User not found."})
        if not verify_password(payload.password, user.password_hash):
            raise ApiException(400, {"password": "Password incorrect."})

        return f"Bearer {self.create_token(user.id)}"
