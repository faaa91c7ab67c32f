# app/domains/eqp/services.py

"""
장비 서비스 모듈입니다.

라우터에서 호출되는 모든 장비 작업(조회, 생성, 수정, 상태 순환, 호리메트로/위치 변경, 삭제)을
구현합니다. 레코드가 없으면 NotFoundError, 검증 실패 시 InvalidInputError를 발생시킵니다.
"""

import logging
from typing import Dict, List, Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings
from app.core.exceptions import InvalidInputError, NotFoundError
from . import models, crud, schemas, validators

logger = logging.getLogger(__name__)

ENTITY_NAME = "Equipamento"

# 운영 상태 순환표: Operacional -> ForaDeServico -> EmManutencao -> Operacional
PROXIMO_STATUS: Dict[str, str] = {
    models.StatusOperacional.OPERACIONAL.value: models.StatusOperacional.FORA_DE_SERVICO.value,
    models.StatusOperacional.FORA_DE_SERVICO.value: models.StatusOperacional.EM_MANUTENCAO.value,
    models.StatusOperacional.EM_MANUTENCAO.value: models.StatusOperacional.OPERACIONAL.value,
}


def proximo_status(atual: str) -> str:
    """다음 운영 상태를 반환합니다. 순환표에 없는 값은 그대로 반환합니다."""
    return PROXIMO_STATUS.get(atual, atual)


def _raise_if_invalid(result: validators.ValidationResult) -> None:
    if not result.ok:
        logger.info("Validation rejected: %s - %s", result.field, result.message)
        raise InvalidInputError(result.message, field=result.field)


def _normalized_values(data: schemas.EquipamentoCreate) -> dict:
    """검증을 통과한 요청을 저장할 값으로 변환합니다. 열거형 값은 정식 표기로 저장합니다."""
    return {
        "codigo": data.codigo.strip(),
        "tipo": validators.parse_enum(models.TipoEquipamento, data.tipo).value,
        "modelo": data.modelo.strip(),
        "horimetro": data.horimetro,
        "status_operacional": validators.parse_enum(models.StatusOperacional, data.status_operacional).value,
        "data_aquisicao": data.data_aquisicao,
        "localizacao_atual": data.localizacao_atual.strip(),
    }


async def _validate_full(
    db: AsyncSession, data: schemas.EquipamentoCreate, *, exclude_id: Optional[int] = None
) -> dict:
    _raise_if_invalid(
        validators.validate_equipamento(data, allow_zero=settings.HOURMETER_ALLOW_ZERO)
    )
    values = _normalized_values(data)
    if await crud.equipamento.get_by_codigo(db, codigo=values["codigo"], exclude_id=exclude_id):
        _raise_if_invalid(validators.ValidationResult.fail("Codigo", validators.MSG_CODIGO_DUPLICADO))
    return values


# =============================================================================
# 조회
# =============================================================================
async def get_equipamento(db: AsyncSession, *, id: int) -> models.Equipamento:
    db_obj = await crud.equipamento.get(db, id=id)
    if db_obj is None:
        raise NotFoundError(ENTITY_NAME, id)
    return db_obj


async def list_equipamentos(db: AsyncSession, *, tipo: Optional[str] = None) -> List[models.Equipamento]:
    """전체 장비 목록. tipo가 주어지면 대소문자 무시 완전 일치로 필터링합니다."""
    if tipo is not None:
        return await crud.equipamento.get_multi_by_tipo(db, tipo=tipo)
    return await crud.equipamento.get_multi(db)


async def get_status(db: AsyncSession, *, id: int) -> schemas.StatusResponse:
    db_obj = await get_equipamento(db, id=id)
    return schemas.StatusResponse(status=db_obj.status_operacional)


# =============================================================================
# 생성 / 수정 / 삭제
# =============================================================================
async def create_equipamento(db: AsyncSession, *, obj_in: schemas.EquipamentoCreate) -> models.Equipamento:
    values = await _validate_full(db, obj_in)
    db_obj = await crud.equipamento.add(db, db_obj=models.Equipamento(**values))
    logger.info("Equipamento created: id=%s codigo=%s", db_obj.id, db_obj.codigo)
    return db_obj


async def update_equipamento(
    db: AsyncSession, *, id: int, obj_in: schemas.EquipamentoUpdate
) -> models.Equipamento:
    db_obj = await get_equipamento(db, id=id)
    values = await _validate_full(db, obj_in, exclude_id=id)
    db_obj = await crud.equipamento.update(db, db_obj=db_obj, values=values)
    logger.info("Equipamento updated: id=%s", id)
    return db_obj


async def advance_status(db: AsyncSession, *, id: int) -> models.Equipamento:
    """운영 상태를 순환표에 따라 한 단계 진행합니다. 알 수 없는 상태는 변경하지 않습니다."""
    db_obj = await get_equipamento(db, id=id)
    atual = db_obj.status_operacional
    novo = proximo_status(atual)
    if novo == atual:
        logger.warning("Unknown status left unchanged: id=%s status=%r", id, atual)
        return db_obj
    db_obj = await crud.equipamento.update(db, db_obj=db_obj, values={"status_operacional": novo})
    logger.info("Status advanced: id=%s %s -> %s", id, atual, novo)
    return db_obj


async def update_horimetro(
    db: AsyncSession, *, id: int, obj_in: schemas.HorimetroUpdate
) -> models.Equipamento:
    db_obj = await get_equipamento(db, id=id)
    _raise_if_invalid(
        validators.validate_horimetro(obj_in.horimetro, allow_zero=settings.HOURMETER_ALLOW_ZERO)
    )
    return await crud.equipamento.update(db, db_obj=db_obj, values={"horimetro": obj_in.horimetro})


async def update_localizacao(
    db: AsyncSession, *, id: int, obj_in: schemas.LocalizacaoUpdate
) -> models.Equipamento:
    db_obj = await get_equipamento(db, id=id)
    _raise_if_invalid(validators.validate_localizacao(obj_in.localizacao_atual))
    return await crud.equipamento.update(
        db, db_obj=db_obj, values={"localizacao_atual": obj_in.localizacao_atual.strip()}
    )


async def delete_equipamento(db: AsyncSession, *, id: int) -> None:
    db_obj = await get_equipamento(db, id=id)
    await crud.equipamento.remove(db, db_obj=db_obj)
    logger.info("Equipamento deleted: id=%s", id)
