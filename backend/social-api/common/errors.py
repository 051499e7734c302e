from __future__ import annotations
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

GENERIC_ERROR = "An error has occured."


class ApiException(Exception):
    """상태 코드와 응답 본문을 그대로 들고 다니는 예외"""

    def __init__(self, status_code: int, payload: Any):
        super().__init__(payload)
        self.status_code = status_code
        self.payload = payload


def not_found(message: str = "Post not found.") -> ApiException:
    return ApiException(404, {"error": message})


async def api_exception_handler(request: Request, exc: ApiException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.payload)


# 요청 본문 타입 오류도 validator 와 같은 {field: message} 400 으로
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        errors.setdefault(field, error.get("msg", "Invalid value."))
    return JSONResponse(status_code=400, content=errors)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on {} {}: {}", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content=GENERIC_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiException, api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
