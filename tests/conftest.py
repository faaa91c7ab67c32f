# tests/conftest.py

from typing import AsyncGenerator, Awaitable, Callable
from datetime import date
from decimal import Decimal

import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# app.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from app.main import app as main_app
from app.core import dependencies as deps
from app.core.config import settings
from app.core.database import get_session

from app.domains.eqp import models as eqp_models


# --- 테스트용 데이터베이스 설정 ---
# 테스트마다 새 인메모리 SQLite DB를 사용합니다.
# SQLite에는 'public' 스키마가 없으므로 schema_translate_map으로 스키마를 제거합니다.
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture(scope="function")
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트 함수마다 테이블이 생성된 새 엔진을 제공합니다."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,   # 인메모리 DB를 하나의 연결로 공유
        connect_args={"check_same_thread": False},
        execution_options={"schema_translate_map": {settings.DB_SCHEMA: None}},
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """테스트용 비동기 데이터베이스 세션을 제공합니다."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with TestingSessionLocal() as session:
        yield session


# --- 비동기 테스트 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    AsyncClient 인스턴스를 생성하고, 테스트용 비동기 DB 세션을 주입합니다.
    """
    async def override_get_session():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()

    try:
        # get_session과 deps.get_db_session 모두 오버라이드
        main_app.dependency_overrides[get_session] = override_get_session
        main_app.dependency_overrides[deps.get_db_session] = override_get_session

        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            yield async_client

    finally:
        # 클라이언트 픽스처가 끝나면 오버라이드를 반드시 복원해야 합니다.
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)


# --- 도메인 픽스처 ---
@pytest_asyncio.fixture(scope="function")
def equipamento_factory(db_session: AsyncSession) -> Callable[..., Awaitable[eqp_models.Equipamento]]:
    """
    검증을 거치지 않고 DB에 장비를 직접 저장하는 팩토리 함수를 반환합니다.
    지정하지 않은 필드는 기본값을 사용합니다.
    """
    async def _create_equipamento(codigo: str, **kwargs) -> eqp_models.Equipamento:
        data = {
            "codigo": codigo,
            "tipo": "Escavadeira",
            "modelo": "CAT320",
            "horimetro": Decimal("100.00"),
            "status_operacional": "Operacional",
            "data_aquisicao": date(2023, 1, 10),
            "localizacao_atual": "Obra A",
            **kwargs,
        }
        equipamento = eqp_models.Equipamento(**data)
        db_session.add(equipamento)
        await db_session.commit()
        await db_session.refresh(equipamento)
        return equipamento
    return _create_equipamento


@pytest_asyncio.fixture(name="test_equipamento")
async def test_equipamento_fixture(equipamento_factory: Callable) -> eqp_models.Equipamento:
    """기본 테스트용 장비 (EQ01, Operacional)."""
    return await equipamento_factory("EQ01")
