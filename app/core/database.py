# app/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- SQLModel의 비동기 엔진을 설정합니다.
- 비동기 세션 생성을 위한 유틸리티 함수를 제공합니다.
- 데이터베이스 스키마와 테이블을 생성하는 함수를 포함합니다 (개발용).
"""

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlalchemy import text

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings

# 모든 SQLModel 클래스가 SQLModel.metadata에 등록되도록 도메인 모델을 임포트합니다.
from app.domains.eqp import models  # noqa

logger = logging.getLogger(__name__)

SCHEMA = [settings.DB_SCHEMA]

# SQLModel 엔진을 생성합니다.
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL.get_secret_value(),  # SecretStr 값에 접근
    echo=settings.DEBUG_MODE,  # 디버그 모드일 때만 SQL 쿼리 출력
    pool_pre_ping=True,
    pool_recycle=3600,  # 1시간마다 연결 재활용
    pool_size=10,
    max_overflow=20
)

# 비동기 세션을 생성하는 '세션 공장'을 정의합니다.
AsyncSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def create_db_and_tables(bind: AsyncEngine = engine) -> None:
    """
    데이터베이스 스키마 및 테이블을 생성합니다.
    개발 환경 전용이며, 기존 테이블을 삭제하지는 않습니다.
    """
    async with bind.begin() as conn:
        for schema_name in SCHEMA:
            await conn.execute(text(f"CREATE SCHEMA IF NOT EXISTS {schema_name}"))
            logger.info("스키마 '%s' 생성 완료 또는 이미 존재.", schema_name)

        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("데이터베이스 테이블 생성이 완료되었습니다 (또는 이미 존재).")


# =============================================================================
# 비동기 데이터베이스 세션 의존성 주입
# =============================================================================
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 새로운 세션을 생성하고, 요청 처리 후 세션을 자동으로 닫습니다.
    """
    async with AsyncSessionLocal() as session:
        yield session


@asynccontextmanager
async def get_async_session_context() -> AsyncGenerator[AsyncSession, None]:
    """
    스크립트 등 요청 밖의 비동기 컨텍스트에서 사용할
    독립적인 DB 세션을 제공하는 컨텍스트 관리자입니다.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
