# app/domains/eqp/schemas.py

"""
'eqp' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.

API 요청(생성, 전체 수정, 호리메트로/위치 부분 수정) 및 응답(조회)에 사용됩니다.
JSON 필드 이름은 camelCase(codigo, statusOperacional, dataAquisicao ...)이며,
요청 필드는 모두 선택 사항으로 받아 validators.py에서 필드별 메시지로 검증합니다.
"""

from typing import Annotated, Optional
from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# JSON 응답에서 호리메트로를 문자열이 아닌 숫자로 직렬화합니다.
HorimetroNumber = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# 1. 요청 스키마
# =============================================================================
class EquipamentoCreate(CamelModel):
    """
    새 장비 생성 요청 본문입니다.
    필수 여부/범위/열거형/중복 검사는 validators.validate_equipamento에서 수행합니다.
    """
    codigo: Optional[str] = Field(None, description="장비 고유 코드 (최대 50자)")
    tipo: Optional[str] = Field(None, description="Escavadeira, Caminhao, Carregadeira, Retroescavadeira, Trator, Guindaste")
    modelo: Optional[str] = Field(None, description="모델명 (최대 120자)")
    horimetro: Optional[Decimal] = Field(None, description="누적 가동 시간")
    status_operacional: Optional[str] = Field(None, description="Operacional, EmManutencao, ForaDeServico")
    data_aquisicao: Optional[date] = Field(None, description="취득일")
    localizacao_atual: Optional[str] = Field(None, description="현재 위치 (최대 200자)")


class EquipamentoUpdate(EquipamentoCreate):
    """전체 필드 수정 요청 본문입니다 (PUT)."""
    pass


class HorimetroUpdate(CamelModel):
    horimetro: Optional[Decimal] = None


class LocalizacaoUpdate(CamelModel):
    localizacao_atual: Optional[str] = None


# =============================================================================
# 2. 응답 스키마
# =============================================================================
class EquipamentoResponse(CamelModel):
    """장비 정보를 클라이언트에 응답하기 위한 모델입니다."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    codigo: str
    tipo: str
    modelo: str
    horimetro: HorimetroNumber
    status_operacional: str
    data_aquisicao: date
    localizacao_atual: str


class StatusResponse(BaseModel):
    status: str
