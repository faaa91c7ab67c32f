# app/domains/eqp/__init__.py

"""
FastAPI 애플리케이션의 'eqp' (equipamentos pesados, 중장비) 도메인 패키지입니다.

이 패키지는 'equipamentos_pesados' 테이블에 해당하는 데이터 모델과
관련된 비즈니스 로직 및 API 엔드포인트를 포함합니다.

주요 서브모듈:
- `models.py`: 테이블 정의와 장비 유형/운영 상태 열거형.
- `schemas.py`: 요청 및 응답 본문 (JSON은 camelCase).
- `validators.py`: 입력 검증 함수 (ValidationResult 반환).
- `crud.py`: 테이블에 대한 비동기 저장소 로직.
- `services.py`: 장비 서비스 (검증, 상태 순환, 변경 적용).
- `routers.py`: /api/equipamentos 엔드포인트 정의.
"""

__title__ = "Equipamentos Pesados Domain"
__description__ = "Manages heavy equipment records, status cycle, hour meter and location."
__version__ = "0.1.0"
__all__ = []
