# app/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.
모든 메서드는 비동기(async) 환경에서 동작합니다.
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar, Any, Dict

from sqlalchemy.exc import IntegrityError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=SQLModel)


class CRUDBase(Generic[ModelType]):
    """
    모델 하나에 대한 저장소(repository) 기본 클래스입니다.
    ID 조회, 목록, 추가, 변경 저장, 삭제를 제공합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """ID를 기준으로 단일 레코드를 조회합니다."""
        return await db.get(self.model, id)

    async def get_multi(self, db: AsyncSession) -> List[ModelType]:
        """전체 레코드를 id 오름차순으로 조회합니다."""
        result = await db.execute(select(self.model).order_by(self.model.id))
        return list(result.scalars().all())

    async def add(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        """새 레코드를 추가하고 생성된 ID를 포함해 반환합니다."""
        db.add(db_obj)
        await self.persist(db)
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self, db: AsyncSession, *, db_obj: ModelType, values: Dict[str, Any]
    ) -> ModelType:
        """주어진 값들을 한 번의 커밋으로 적용합니다."""
        for key, value in values.items():
            setattr(db_obj, key, value)

        db.add(db_obj)
        await self.persist(db)
        await db.refresh(db_obj)
        return db_obj

    async def remove(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        await db.delete(db_obj)
        await self.persist(db)
        return db_obj

    async def persist(self, db: AsyncSession) -> None:
        """
        변경 내용을 커밋합니다.
        제약 조건 위반 시 롤백 후 IntegrityError를 그대로 올립니다 (409 핸들러에서 처리).
        """
        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            logger.error("IntegrityError while persisting %s: %s", self.model.__name__, e.orig)
            raise
