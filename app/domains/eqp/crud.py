# app/domains/eqp/crud.py

"""
'eqp' 도메인 (중장비)과 관련된 저장소(CRUD) 로직을 담당하는 모듈입니다.
"""

from typing import List, Optional

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from . import models as eqp_models


# =============================================================================
# 1. 장비 (Equipamento) CRUD
# =============================================================================
class CRUDEquipamento(CRUDBase[eqp_models.Equipamento]):
    def __init__(self):
        super().__init__(model=eqp_models.Equipamento)

    async def get_by_codigo(
        self, db: AsyncSession, *, codigo: str, exclude_id: Optional[int] = None
    ) -> Optional[eqp_models.Equipamento]:
        """코드로 장비를 조회합니다. exclude_id가 주어지면 해당 레코드는 제외합니다."""
        statement = select(self.model).where(self.model.codigo == codigo)
        if exclude_id is not None:
            statement = statement.where(self.model.id != exclude_id)
        result = await db.execute(statement)
        return result.scalars().first()

    async def get_multi_by_tipo(self, db: AsyncSession, *, tipo: str) -> List[eqp_models.Equipamento]:
        """장비 유형으로 목록을 조회합니다 (대소문자 무시, 완전 일치)."""
        statement = (
            select(self.model)
            .where(func.lower(self.model.tipo) == tipo.strip().lower())
            .order_by(self.model.id)
        )
        result = await db.execute(statement)
        return list(result.scalars().all())


equipamento = CRUDEquipamento()
