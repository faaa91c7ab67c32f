# app/core/exceptions.py

"""
도메인 예외와 FastAPI 예외 핸들러를 정의하는 모듈입니다.

- NotFoundError     -> 404 (빈 본문)
- InvalidInputError -> 400 {"detail": 메시지, "field": 필드명}
- IntegrityError    -> 409 (사전 검사를 통과한 제약 조건 위반, 예: 동시 요청)
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)

INTEGRITY_CONFLICT_MESSAGE = "Conflito de integridade ao gravar o equipamento."


class NotFoundError(Exception):
    """요청한 ID의 레코드가 존재하지 않을 때 발생합니다."""

    def __init__(self, entity: str, id: int):
        self.entity = entity
        self.id = id
        super().__init__(f"{entity} {id} not found")


class InvalidInputError(Exception):
    """입력 검증 실패. 처음 실패한 규칙의 필드와 메시지만 담습니다."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)


async def not_found_handler(request: Request, exc: NotFoundError) -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message, "field": exc.field},
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.error("IntegrityError on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": INTEGRITY_CONFLICT_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """main.py에서 애플리케이션 생성 직후 호출합니다."""
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
