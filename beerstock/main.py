# beerstock/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from beerstock.core.config import settings
from beerstock.core.database import Base, engine
from beerstock.core.logging import configure_logging, get_logger
from beerstock.routers.beer_router import router as beer_router
import beerstock.models  # noqa: F401  (테이블 메타데이터 등록)

configure_logging()
logger = get_logger(__name__)


# --------------------------------
# 서버 이벤트
# --------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("db_tables_created", url=engine.url.render_as_string(hide_password=True))
    yield
    engine.dispose()
    logger.info("server_shutdown")


app = FastAPI(
    title="Beer Stock API",
    description="API for managing beer stock",
    version="0.1.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# 요청 본문 검증 실패는 400으로 응답
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("request_validation_failed", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


# --------------------------------
# 라우터 등록
# --------------------------------
app.include_router(beer_router)


if __name__ == "__main__":
    uvicorn.run("beerstock.main:app", host="0.0.0.0", port=settings.SERVER_PORT, reload=settings.DEBUG)
