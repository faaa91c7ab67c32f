# app/domains/eqp/validators.py

"""
장비 요청 본문 검증 함수 모듈입니다.

각 함수는 예외를 던지지 않고 ValidationResult를 반환합니다.
규칙은 정해진 순서대로 검사하며, 처음 실패한 규칙의 필드와 메시지만 돌려줍니다.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, Type, TypeVar

from . import models
from . import schemas

E = TypeVar("E", bound=Enum)

# numeric(10,2) 컬럼에 그대로 들어가는 값의 범위
HORIMETRO_LIMITE = Decimal(10) ** (models.HORIMETRO_PRECISION - models.HORIMETRO_SCALE)
HORIMETRO_QUANTUM = Decimal(1).scaleb(-models.HORIMETRO_SCALE)


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    field: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(ok=True)

    @classmethod
    def fail(cls, field: str, message: str) -> "ValidationResult":
        return cls(ok=False, field=field, message=message)


OK = ValidationResult.success()


# =============================================================================
# 메시지
# =============================================================================
def msg_obrigatorio(campo: str) -> str:
    return f"O campo '{campo}' é obrigatório."


def msg_tamanho_maximo(campo: str, limite: int) -> str:
    return f"O campo '{campo}' deve ter no máximo {limite} caracteres."


MSG_HORIMETRO_POSITIVO = "O campo 'Horimetro' deve ser um valor positivo."
MSG_HORIMETRO_NAO_NEGATIVO = "O campo 'Horimetro' não pode ser negativo."
MSG_HORIMETRO_FORMATO = (
    "O campo 'Horimetro' deve ter no máximo "
    f"{models.HORIMETRO_PRECISION - models.HORIMETRO_SCALE} dígitos inteiros "
    f"e {models.HORIMETRO_SCALE} casas decimais."
)
MSG_DATA_FUTURA ="O campo 'DataAquisicao' não pode ser uma data futura."
MSG_CODIGO_DUPLICADO = "O campo 'Codigo' deve ser único. Já existe um equipamento com esse código."
MSG_STATUS_INVALIDO = (
    "O campo 'StatusOperacional' deve ser um dos seguintes valores: "
    + ", ".join(s.value for s in models.StatusOperacional) + "."
)
MSG_TIPO_INVALIDO = (
    "O campo 'Tipo' deve ser um dos seguintes valores: "
    + ", ".join(t.value for t in models.TipoEquipamento) + "."
)


# =============================================================================
# 보조 함수
# =============================================================================
def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def parse_enum(enum_cls: Type[E], value: Optional[str]) -> Optional[E]:
    """열거형 값을 대소문자 구분 없이 찾습니다. 없으면 None."""
    if value is None:
        return None
    wanted = value.strip().lower()
    for member in enum_cls:
        if member.value.lower() == wanted:
            return member
    return None


# =============================================================================
# 검증 함수
# =============================================================================
def validate_horimetro(value: Optional[Decimal], *, allow_zero: bool = False) -> ValidationResult:
    """
    allow_zero=False 이면 0보다 커야 하고, True 이면 0 이상이면 됩니다.
    부호 검사 뒤에 컬럼 정밀도(정수 8자리, 소수 2자리)를 넘는 값을 거부합니다.
    """
    if value is None:
        return ValidationResult.fail("Horimetro", msg_obrigatorio("Horimetro"))
    if allow_zero:
        if value < 0:
            return ValidationResult.fail("Horimetro", MSG_HORIMETRO_NAO_NEGATIVO)
    elif value <= 0:
        return ValidationResult.fail("Horimetro", MSG_HORIMETRO_POSITIVO)
    # 크기를 먼저 확인해야 quantize가 컨텍스트 정밀도를 넘지 않습니다.
    if value >= HORIMETRO_LIMITE or value != value.quantize(HORIMETRO_QUANTUM):
        return ValidationResult.fail("Horimetro", MSG_HORIMETRO_FORMATO)
    return OK


def validate_localizacao(value: Optional[str]) -> ValidationResult:
    if is_blank(value):
        return ValidationResult.fail("LocalizacaoAtual", msg_obrigatorio("LocalizacaoAtual"))
    if len(value.strip()) > models.LOCALIZACAO_MAX_LENGTH:
        return ValidationResult.fail(
            "LocalizacaoAtual", msg_tamanho_maximo("LocalizacaoAtual", models.LOCALIZACAO_MAX_LENGTH)
        )
    return OK


def validate_data_aquisicao(value: Optional[date], *, hoje: Optional[date] = None) -> ValidationResult:
    if value is None:
        return ValidationResult.fail("DataAquisicao", msg_obrigatorio("DataAquisicao"))
    if value > (hoje or date.today()):
        return ValidationResult.fail("DataAquisicao", MSG_DATA_FUTURA)
    return OK


def validate_equipamento(
    data: schemas.EquipamentoCreate,
    *,
    allow_zero: bool = False,
    hoje: Optional[date] = None,
) -> ValidationResult:
    """
    생성/전체 수정 요청을 검증합니다. 코드 중복 검사는 저장소가 필요하므로 services에서 합니다.

    검사 순서:
    1. Codigo, Tipo, Modelo, StatusOperacional 필수
    2. Horimetro 범위
    3. DataAquisicao 필수 및 미래 날짜 불가
    4. LocalizacaoAtual 필수
    5. StatusOperacional, Tipo 열거형 값
    6. 문자열 최대 길이
    """
    for campo, valor in (
        ("Codigo", data.codigo),
        ("Tipo", data.tipo),
        ("Modelo", data.modelo),
        ("StatusOperacional", data.status_operacional),
    ):
        if is_blank(valor):
            return ValidationResult.fail(campo, msg_obrigatorio(campo))

    result = validate_horimetro(data.horimetro, allow_zero=allow_zero)
    if not result.ok:
        return result

    result = validate_data_aquisicao(data.data_aquisicao, hoje=hoje)
    if not result.ok:
        return result

    if is_blank(data.localizacao_atual):
        return ValidationResult.fail("LocalizacaoAtual", msg_obrigatorio("LocalizacaoAtual"))

    if parse_enum(models.StatusOperacional, data.status_operacional) is None:
        return ValidationResult.fail("StatusOperacional", MSG_STATUS_INVALIDO)
    if parse_enum(models.TipoEquipamento, data.tipo) is None:
        return ValidationResult.fail("Tipo", MSG_TIPO_INVALIDO)

    for campo, valor, limite in (
        ("Codigo", data.codigo, models.CODIGO_MAX_LENGTH),
        ("Modelo", data.modelo, models.MODELO_MAX_LENGTH),
        ("LocalizacaoAtual", data.localizacao_atual, models.LOCALIZACAO_MAX_LENGTH),
    ):
        if len(valor.strip()) > limite:
            return ValidationResult.fail(campo, msg_tamanho_maximo(campo, limite))

    return OK
