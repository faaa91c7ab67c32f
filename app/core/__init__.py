# app/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

- `config.py`: 애플리케이션의 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: 데이터베이스 연결, 세션 관리 (SQLModel 및 AsyncSQLAlchemy).
- `dependencies.py`: FastAPI의 의존성 주입 시스템에서 사용될 공통 의존성 함수들.
- `crud_base.py`: 공통 비동기 CRUD 기본 클래스.
- `exceptions.py`: 도메인 예외와 HTTP 응답 변환 핸들러.
- `logging_config.py`: 루트 로거 설정.
"""

__title__ = "Equipamentos Pesados Core"
__description__ = "Core components for the Equipamentos Pesados FastAPI application."
__version__ = "0.1.0"
__all__ = []
