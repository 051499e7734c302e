# services/db_service.py
from typing import Generator

from fastapi import Request
from sqlalchemy.orm import Session

from db import Database


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI Depends 에서 사용.
    앱 팩토리가 app.state.database 에 넣어 둔 핸들에서 요청 단위 세션을 엽니다.
    """
    yield from get_database(request).session()
