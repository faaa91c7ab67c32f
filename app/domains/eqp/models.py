# app/domains/eqp/models.py

"""
'eqp' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

테이블 이름, 컬럼 이름, 길이, 고유 인덱스를 이 모듈에서 명시적으로 정의합니다.
"""

from typing import Optional
from datetime import date
from decimal import Decimal
from enum import Enum

from sqlalchemy import Index, Numeric
from sqlmodel import Field, SQLModel, Column

from app.core.config import settings

TABLE_NAME = "equipamentos_pesados"

# 컬럼 길이 제한 (검증 함수와 공유)
CODIGO_MAX_LENGTH = 50
TIPO_MAX_LENGTH = 120
MODELO_MAX_LENGTH = 120
STATUS_MAX_LENGTH = 50
LOCALIZACAO_MAX_LENGTH = 200

# 호리메트로 numeric(precision, scale)
HORIMETRO_PRECISION = 10
HORIMETRO_SCALE = 2


# =============================================================================
# 장비 유형 / 운영 상태 열거형
# =============================================================================
class TipoEquipamento(str, Enum):
    """장비 유형. 값은 DB와 API에서 사용하는 문자열 그대로입니다."""
    ESCAVADEIRA = "Escavadeira"            # Excavator
    CAMINHAO = "Caminhao"                  # Truck
    CARREGADEIRA = "Carregadeira"          # Loader
    RETROESCAVADEIRA = "Retroescavadeira"  # Backhoe loader
    TRATOR = "Trator"                      # Tractor
    GUINDASTE = "Guindaste"                # Crane


class StatusOperacional(str, Enum):
    """장비 운영 상태."""
    OPERACIONAL = "Operacional"
    EM_MANUTENCAO = "EmManutencao"
    FORA_DE_SERVICO = "ForaDeServico"


# =============================================================================
# equipamentos_pesados 테이블 모델
# =============================================================================
class EquipamentoBase(SQLModel):
    codigo: str = Field(max_length=CODIGO_MAX_LENGTH, description="장비 고유 코드")
    tipo: str = Field(max_length=TIPO_MAX_LENGTH, description="장비 유형 (TipoEquipamento 값)")
    modelo: str = Field(max_length=MODELO_MAX_LENGTH)
    horimetro: Decimal = Field(
        sa_column=Column(Numeric(HORIMETRO_PRECISION, HORIMETRO_SCALE), nullable=False),
        description="누적 가동 시간 (소수점 2자리)"
    )
    # 문자열 컬럼으로 저장합니다. 열거형에 없는 값은 상태 순환에서 그대로 유지됩니다.
    status_operacional: str = Field(max_length=STATUS_MAX_LENGTH)
    data_aquisicao: date = Field(description="취득일 (미래 날짜 불가)")
    localizacao_atual: str = Field(max_length=LOCALIZACAO_MAX_LENGTH)


class Equipamento(EquipamentoBase, table=True):
    __tablename__ = TABLE_NAME
    __table_args__ = (
        Index("ix_equipamentos_pesados_codigo", "codigo", unique=True),
        {'schema': settings.DB_SCHEMA},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
