# flake8: noqa
# scripts/init_db.py

import asyncio
from datetime import date
from decimal import Decimal

import typer

from app.core.config import settings
from app.core.database import create_db_and_tables, get_async_session_context
from app.core.exceptions import InvalidInputError
from app.core.logging_config import setup_logging
from app.domains.eqp import schemas as eqp_schemas
from app.domains.eqp import services as eqp_services

cli = typer.Typer(help="Equipamentos Pesados 데이터베이스 관리 명령")

SAMPLE_EQUIPAMENTOS = [
    dict(codigo="ESC-001", tipo="Escavadeira", modelo="CAT 320", horimetro=Decimal("1520.50"),
         status_operacional="Operacional", data_aquisicao=date(2021, 3, 15), localizacao_atual="Obra Norte"),
    dict(codigo="CAM-001", tipo="Caminhao", modelo="VW Constellation", horimetro=Decimal("860.00"),
         status_operacional="EmManutencao", data_aquisicao=date(2022, 7, 1), localizacao_atual="Oficina Central"),
    dict(codigo="GUI-001", tipo="Guindaste", modelo="Liebherr LTM 1100", horimetro=Decimal("310.25"),
         status_operacional="ForaDeServico", data_aquisicao=date(2019, 11, 20), localizacao_atual="Porto"),
]


@cli.command("create-tables")
def create_tables():
    """
    스키마와 테이블을 생성합니다 (개발 환경 전용, 기존 테이블은 유지).
    """
    setup_logging(settings.LOG_LEVEL)
    typer.echo(f"스키마 '{settings.DB_SCHEMA}'에 테이블을 생성합니다...")
    asyncio.run(create_db_and_tables())
    typer.echo("완료.")


@cli.command("seed")
def seed():
    """
    예시 장비 데이터를 등록합니다. 서비스 계층을 거치므로 검증 규칙이 그대로 적용됩니다.
    이미 존재하는 코드는 건너뜁니다.
    """
    setup_logging(settings.LOG_LEVEL)

    async def run_seed():
        for data in SAMPLE_EQUIPAMENTOS:
            try:
                async with get_async_session_context() as db:
                    db_obj = await eqp_services.create_equipamento(
                        db, obj_in=eqp_schemas.EquipamentoCreate(**data)
                    )
                typer.echo(f"등록: {db_obj.codigo} (id={db_obj.id})")
            except InvalidInputError as e:
                typer.echo(f"건너뜀: {data['codigo']} - {e.message}")

    asyncio.run(run_seed())


if __name__ == "__main__":
    cli()
