# tests/domains/__init__.py

"""
도메인별 테스트 패키지입니다.

- `test_eqp_n.py`: 'eqp' 도메인 API 통합 테스트
- `test_eqp_validators.py`: 검증 함수와 상태 순환표 단위 테스트
- `test_eqp_models.py`: ORM 모델 정의와 저장소 계층 테스트
"""

__title__ = "Equipamentos Pesados Domain Tests"
__version__ = "0.1.0"
__all__ = []
