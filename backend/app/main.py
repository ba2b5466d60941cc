# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.endpoints import auth, schedules, timeoff
from app.core.config import get_settings
from app.core.exceptions import AppError
from app.db.mongo import close_mongo_connection, connect_to_mongo, ensure_indexes

# JWT_SECRET_KEY 가 없으면 여기서 바로 실패합니다 (기본 키로 기동하지 않음)
settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# [수명 주기 관리] DB 연결 및 해제
@asynccontextmanager
async def lifespan(app: FastAPI):
    await connect_to_mongo(settings.MONGO_URI, settings.MONGO_DB_NAME)
    await ensure_indexes()
    logger.info("Running in %s mode", settings.ENVIRONMENT)
    yield
    await close_mongo_connection()


app = FastAPI(title="Schedule & Time Off Backend", lifespan=lifespan)

# --- 미들웨어 설정 ---
origins = settings.cors_origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    # "*" 와 credentials 는 같이 쓸 수 없음
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- 예외 처리: 모든 오류 응답은 {"message": ...} 형태 ---
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected malformed body on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=400, content={"message": "Invalid request body"})


app.include_router(auth.router, prefix="/api/auth")
app.include_router(schedules.router, prefix="/api/schedule")
app.include_router(timeoff.router, prefix="/api/timeoff")


def run():
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
