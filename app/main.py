import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

# 핵심 설정 및 데이터베이스 모듈 임포트
from app.core.config import settings
from app.core.database import engine
from app.core.dependencies import get_db_session
from app.core.exceptions import register_exception_handlers
from app.core.logging_config import setup_logging

from app import API_PREFIX

# 도메인 라우터 임포트
from app.domains.eqp.routers import router as eqp_router

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI 애플리케이션의 수명 주기 이벤트를 처리합니다.
    테이블 생성은 scripts/init_db.py (create-tables)로 분리되어 있습니다.
    """
    logger.info("%s 시작 (env=%s)", settings.APP_NAME, settings.APP_ENV)

    yield  # 애플리케이션 실행

    logger.info("%s 종료 중...", settings.APP_NAME)
    # 데이터베이스 연결 풀 종료
    await engine.dispose()
    logger.info("데이터베이스 연결 풀 종료 완료.")


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",       # Swagger UI
    redoc_url="/redoc",     # ReDoc
    lifespan=lifespan
)

register_exception_handlers(app)

# -- CORS 미들웨어 설정 --
# 프로덕션에서는 CORS_ORIGINS를 실제 프론트엔드 도메인으로 제한해야 합니다.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -- 도메인 라우터 포함 --
app.include_router(eqp_router, prefix=f"{API_PREFIX}/equipamentos", tags=["Equipamentos Pesados (중장비 관리)"])


# -- 루트 엔드포인트 --
@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    """API의 시작점을 알리고 문서 링크를 제공합니다."""
    return {"message": "Welcome to Equipamentos Pesados API. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(get_db_session)):
    """
    데이터베이스에 select 1을 실행하여 서비스의 정상 작동 여부를 확인합니다.
    """
    try:
        result = await session.exec(select(1))
        if result.first():
            return {"status": "ok", "database_connection": "successful"}
    except Exception as e:
        logger.error("Health check failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Database connection error during health check: {e}"
        )
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Database health check failed: No result from test query"
    )


# -- Uvicorn 서버 직접 실행 (개발용) --
if __name__ == "__main__":
    import uvicorn
    # reload=True는 코드 변경 시 서버를 자동으로 재시작합니다. 프로덕션에서는 사용하지 마세요.
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG_MODE, log_level=settings.LOG_LEVEL.lower())
