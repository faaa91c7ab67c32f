# tests/test_main.py

"""
FastAPI 애플리케이션의 메인 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.

- 애플리케이션의 루트 경로 (`/`) 응답을 테스트합니다.
- 데이터베이스 연결 헬스 체크 엔드포인트 (`/health-check`)를 테스트합니다.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_read_root(client: AsyncClient):
    """루트 엔드포인트 (`GET /`)가 환영 메시지를 반환하는지 테스트합니다."""
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to Equipamentos Pesados API. Visit /docs for interactive API documentation."}


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """헬스 체크 엔드포인트가 데이터베이스 연결 성공을 반환하는지 테스트합니다."""
    response = await client.get("/health-check")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database_connection": "successful"}


@pytest.mark.asyncio
async def test_openapi_lists_equipamentos_routes(client: AsyncClient):
    response = await client.get("/openapi.json")

    assert response.status_code == 200
    paths = response.json()["paths"]
    assert "/api/equipamentos" in paths
    assert "/api/equipamentos/{id}/avancar-status" in paths
    assert "/api/equipamentos/{tipo}/tipo" in paths
