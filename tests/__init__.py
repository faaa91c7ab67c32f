# tests/__init__.py

"""
Equipamentos Pesados API 테스트 스위트 패키지입니다.

- `conftest.py`: 인메모리 SQLite 엔진, 세션, 비동기 테스트 클라이언트, 장비 팩토리 픽스처
- `test_main.py`: 루트 / 헬스 체크 / OpenAPI 경로 테스트
- `domains/`: 도메인별 테스트 (eqp)
"""

# 패키지 메타데이터 (선택 사항)
__title__ = "Equipamentos Pesados API Tests"
__description__ = "Test suite for the Equipamentos Pesados FastAPI application."
__version__ = "0.1.0"
__all__ = []
