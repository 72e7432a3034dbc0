import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette import status

import config
from db.database import engine
from db import models
from db.db_uploader import init_data
from exceptions import UsernameTakenError, InvalidCredentialsError, LoginRequiredError, AccessDeniedError
from routers import api
import uvicorn

logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s %(levelname)s [%(name)s] %(message)s')
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 데이터베이스 연결에 실패해도 서버는 계속 실행됩니다
    try:
        models.Base.metadata.create_all(bind=engine)
        init_data()
        logger.info('Connected to database')
    except SQLAlchemyError:
        logger.exception('Database connection failed')

    yield

    engine.dispose()


description = """
이벤트 예약 시스템
회원은 자신의 이벤트를 만들고 예약할 수 있으며, 어드민은 모든 이벤트를 관리합니다.

## 회원
* **회원가입**
* **로그인 / 로그아웃**

## 이벤트
* **이벤트 조회**
* **이벤트 생성**
* **이벤트 예약**

## 어드민
* **전체 이벤트 조회**
* **이벤트 생성 / 삭제**
"""

app = FastAPI(
    title='Event Booking',
    description=description,
    summary='이벤트 예약 시스템',
    lifespan=lifespan
)

app.include_router(api.router)


@app.exception_handler(UsernameTakenError)
async def username_taken_handler(request: Request, exc: UsernameTakenError):
    return HTMLResponse("⚠️ Username already taken. <a href='/signup'>Try another</a>")


@app.exception_handler(InvalidCredentialsError)
async def invalid_credentials_handler(request: Request, exc: InvalidCredentialsError):
    return HTMLResponse("Invalid credentials. <a href='/login'>Try again</a>")


@app.exception_handler(LoginRequiredError)
async def login_required_handler(request: Request, exc: LoginRequiredError):
    return RedirectResponse('/login', status_code=status.HTTP_302_FOUND)


@app.exception_handler(AccessDeniedError)
async def access_denied_handler(request: Request, exc: AccessDeniedError):
    return PlainTextResponse('Access denied')


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception('Database error while handling %s %s', request.method, request.url.path, exc_info=exc)
    return PlainTextResponse('Error occurred. Please try again.', status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


if __name__ == '__main__':
    logger.info('Server running at http://localhost:%s', config.PORT)
    uvicorn.run('main:app', host='0.0.0.0', port=config.PORT)
