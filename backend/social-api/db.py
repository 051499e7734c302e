from typing import Generator

from loguru import logger
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session
from sqlalchemy.pool import StaticPool

from settings import Settings


class Base(DeclarativeBase):
    pass


class Database:
    """
    엔진/세션 팩토리 핸들.
    앱 팩토리에서 생성되어 app.state.database 로 주입됩니다.
    """

    def __init__(self, url: str, **engine_kwargs):
        self.url = url
        if url.startswith("sqlite"):
            engine_kwargs.pop("pool_pre_ping", None)
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            # 인메모리 DB는 커넥션 하나를 공유해야 테이블이 유지됨
            if url in ("sqlite://", "sqlite:///:memory:"):
                engine_kwargs["poolclass"] = StaticPool
        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autocommit=False,
            autoflush=False,
            future=True,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url, **settings.engine_kwargs())

    def authenticate(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error("Connection refused. Error: {}", e)
            return False
        logger.info("Database connection established.")
        return True

    def sync(self) -> None:
        # 모델 import 이후 호출 필요
        import models  # noqa: F401
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Generator[Session, None, None]:
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()
