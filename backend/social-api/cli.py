from __future__ import annotations
from pathlib import Path

import typer
import uvicorn
from loguru import logger

from db import Database
from settings import settings
from services.legacy_import import import_file
from utils.logging import setup_logging

app = typer.Typer(pretty_exceptions_show_locals=False)

@app.command("serve")
def serve(reload: bool = typer.Option(False, help="코드 변경 시 자동 재시작")):
    """API 서버를 실행합니다."""
    uvicorn.run("main:app", host=settings.SERVER_HOST, port=settings.SERVER_PORT, reload=reload)

@app.command("init-db")
def init_db():
    """DB 연결 확인 후 테이블을 생성합니다."""
    setup_logging(settings.LOG_LEVEL, settings.LOG_JSON)
    database = Database.from_settings(settings)
    if not database.authenticate():
        raise typer.Exit(code=1)
    database.sync()
    logger.info("[OK] schema synchronised")

@app.command("import-legacy")
def import_legacy(dump: Path = typer.Argument(..., exists=True, readable=True, help="구 posts 테이블 JSON 덤프")):
    """직렬화 컬럼 형태의 구 posts 덤프를 이관합니다."""
    setup_logging(settings.LOG_LEVEL, settings.LOG_JSON)
    database = Database.from_settings(settings)
    database.sync()
    with database.SessionLocal() as db:
        imported, skipped = import_file(db, dump)
    logger.info(f"Done. imported={imported} skipped={skipped}")

if __name__ == "__main__":
    app()
