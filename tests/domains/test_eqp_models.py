# tests/domains/test_eqp_models.py

"""
'eqp' 도메인 ORM 모델과 저장소(CRUD) 계층 테스트 모듈입니다.

- 테이블 이름, 스키마, 컬럼 길이, NOT NULL, 고유 인덱스 정의
- 고유 인덱스 / NOT NULL 위반 시 IntegrityError와 롤백
- get_by_codigo의 exclude_id, get_multi_by_tipo의 대소문자 무시 조회
"""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings
from app.domains.eqp import crud as eqp_crud
from app.domains.eqp import models as eqp_models


def test_table_definition():
    table = eqp_models.Equipamento.__table__

    assert table.name == "equipamentos_pesados"
    assert table.schema == settings.DB_SCHEMA
    assert table.c.codigo.type.length == 50
    assert table.c.modelo.type.length == 120
    assert table.c.localizacao_atual.type.length == 200
    assert table.c.horimetro.type.precision == 10
    assert table.c.horimetro.type.scale == 2

    for column in ("codigo", "tipo", "modelo", "horimetro", "status_operacional", "data_aquisicao", "localizacao_atual"):
        assert table.c[column].nullable is False, column

    unique_indexes = [ix for ix in table.indexes if ix.unique]
    assert [ix.name for ix in unique_indexes] == ["ix_equipamentos_pesados_codigo"]
    assert [c.name for c in unique_indexes[0].columns] == ["codigo"]


@pytest.mark.asyncio
class TestEquipamentoPersistence:
    """저장소 계층 테스트 그룹"""

    async def test_duplicate_codigo_violates_unique_index(self, db_session: AsyncSession, equipamento_factory):
        """(실패) 사전 검사를 거치지 않은 중복 코드는 IntegrityError 후 롤백"""
        await equipamento_factory("UNICO")

        duplicado = eqp_models.Equipamento(
            codigo="UNICO",
            tipo="Trator",
            modelo="JD 6110",
            horimetro=Decimal("1.00"),
            status_operacional="Operacional",
            data_aquisicao=date(2022, 2, 2),
            localizacao_atual="Fazenda",
        )
        with pytest.raises(IntegrityError):
            await eqp_crud.equipamento.add(db_session, db_obj=duplicado)

        todos = await eqp_crud.equipamento.get_multi(db_session)
        assert [e.codigo for e in todos] == ["UNICO"]

    async def test_missing_required_column_violates_not_null(self, db_session: AsyncSession):
        incompleto = eqp_models.Equipamento(
            codigo="SEM-LOCAL",
            tipo="Trator",
            modelo="JD 6110",
            horimetro=Decimal("1.00"),
            status_operacional="Operacional",
            data_aquisicao=date(2022, 2, 2),
        )
        with pytest.raises(IntegrityError):
            await eqp_crud.equipamento.add(db_session, db_obj=incompleto)

    async def test_get_by_codigo_with_exclude_id(self, db_session: AsyncSession, equipamento_factory):
        equipamento = await equipamento_factory("PROPRIO")

        found = await eqp_crud.equipamento.get_by_codigo(db_session, codigo="PROPRIO")
        assert found is not None and found.id == equipamento.id

        assert await eqp_crud.equipamento.get_by_codigo(
            db_session, codigo="PROPRIO", exclude_id=equipamento.id
        ) is None

    async def test_get_multi_by_tipo(self, db_session: AsyncSession, equipamento_factory):
        await equipamento_factory("C-1", tipo="Caminhao")
        await equipamento_factory("E-1")
        await equipamento_factory("C-2", tipo="Caminhao")

        caminhoes = await eqp_crud.equipamento.get_multi_by_tipo(db_session, tipo="CAMINHAO")
        assert [e.codigo for e in caminhoes] == ["C-1", "C-2"]

    async def test_horimetro_keeps_two_decimal_places(self, db_session: AsyncSession, equipamento_factory):
        equipamento = await equipamento_factory("DEC", horimetro=Decimal("1234.56"))

        stored = await eqp_crud.equipamento.get(db_session, id=equipamento.id)
        assert stored.horimetro == Decimal("1234.56")
