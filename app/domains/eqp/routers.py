# app/domains/eqp/routers.py

"""
'eqp' 도메인 (중장비)의 API 엔드포인트를 정의하는 모듈입니다.

/api/equipamentos 아래에서 장비 조회, 생성, 전체 수정, 상태 순환,
호리메트로/위치 부분 수정, 삭제 엔드포인트를 제공합니다.
라우터는 요청/응답 변환만 담당하고, 검증과 변경은 services 모듈이 수행합니다.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Request, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.dependencies import get_db_session

from app.domains.eqp import schemas as eqp_schemas
from app.domains.eqp import services as eqp_services


router = APIRouter(
    tags=["Equipamentos Pesados (중장비 관리)"],
    responses={404: {"description": "Not found"}},
)


#  =============================================================================
#  1. 조회
#  =============================================================================
@router.get("/{id}", response_model=eqp_schemas.EquipamentoResponse, summary="특정 장비 조회")
async def read_equipamento(
    id: int,
    db: AsyncSession = Depends(get_db_session)
):
    """특정 ID의 장비 정보를 조회합니다. 없으면 404 (빈 본문)."""
    return await eqp_services.get_equipamento(db, id=id)


@router.get("", response_model=List[eqp_schemas.EquipamentoResponse], summary="장비 목록 조회")
async def read_equipamentos(
    tipo: Optional[str] = None,
    db: AsyncSession = Depends(get_db_session)
):
    """
    모든 장비 목록을 조회합니다.
    - `tipo`: 장비 유형으로 필터링 (대소문자 무시)
    """
    return await eqp_services.list_equipamentos(db, tipo=tipo)


@router.get("/{id}/status", response_model=eqp_schemas.StatusResponse, summary="장비 운영 상태 조회")
async def read_equipamento_status(
    id: int,
    db: AsyncSession = Depends(get_db_session)
):
    return await eqp_services.get_status(db, id=id)


@router.get("/{tipo}/tipo", response_model=List[eqp_schemas.EquipamentoResponse], summary="유형별 장비 목록 조회")
async def read_equipamentos_by_tipo(
    tipo: str,
    db: AsyncSession = Depends(get_db_session)
):
    """특정 유형의 장비 목록을 조회합니다 (대소문자 무시, 완전 일치)."""
    return await eqp_services.list_equipamentos(db, tipo=tipo)


#  =============================================================================
#  2. 생성 / 수정 / 삭제
#  =============================================================================
@router.post("", response_model=eqp_schemas.EquipamentoResponse, status_code=status.HTTP_201_CREATED, summary="새 장비 생성")
async def create_equipamento(
    equipamento_create: eqp_schemas.EquipamentoCreate,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db_session)
):
    """
    새로운 장비를 생성합니다.
    검증 실패 시 처음 실패한 규칙의 메시지와 함께 400을 반환합니다.
    """
    db_obj = await eqp_services.create_equipamento(db, obj_in=equipamento_create)
    response.headers["Location"] = str(request.url_for("read_equipamento", id=db_obj.id))
    return db_obj


@router.put("/{id}", response_model=eqp_schemas.EquipamentoResponse, summary="장비 정보 전체 수정")
async def update_equipamento(
    id: int,
    equipamento_update: eqp_schemas.EquipamentoUpdate,
    db: AsyncSession = Depends(get_db_session)
):
    """
    특정 ID의 장비 정보를 수정합니다.
    자기 자신의 코드는 유지할 수 있지만, 다른 장비의 코드와 중복되면 400을 반환합니다.
    """
    return await eqp_services.update_equipamento(db, id=id, obj_in=equipamento_update)


@router.patch("/{id}/avancar-status", response_model=eqp_schemas.EquipamentoResponse, summary="운영 상태 한 단계 진행")
async def avancar_status(
    id: int,
    db: AsyncSession = Depends(get_db_session)
):
    """Operacional -> ForaDeServico -> EmManutencao -> Operacional 순서로 순환합니다."""
    return await eqp_services.advance_status(db, id=id)


@router.patch("/{id}/atualizar-horimetro", response_model=eqp_schemas.EquipamentoResponse, summary="호리메트로 수정")
async def atualizar_horimetro(
    id: int,
    horimetro_update: eqp_schemas.HorimetroUpdate,
    db: AsyncSession = Depends(get_db_session)
):
    return await eqp_services.update_horimetro(db, id=id, obj_in=horimetro_update)


@router.patch("/{id}/atualizar-localizacao", response_model=eqp_schemas.EquipamentoResponse, summary="현재 위치 수정")
async def atualizar_localizacao(
    id: int,
    localizacao_update: eqp_schemas.LocalizacaoUpdate,
    db: AsyncSession = Depends(get_db_session)
):
    return await eqp_services.update_localizacao(db, id=id, obj_in=localizacao_update)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT, summary="장비 삭제")
async def delete_equipamento(
    id: int,
    db: AsyncSession = Depends(get_db_session)
):
    await eqp_services.delete_equipamento(db, id=id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
