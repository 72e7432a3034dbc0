import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
from starlette import status

import config
from auth.dependencies import get_session_id
from auth.session_store import SessionStore, get_session_store
from db.database import get_db
from routers.templates import templates
from schemas.user import Role, SignupUser, LoginUser
from service.user_service import UserService
from util import encode_session_token

logger = logging.getLogger(__name__)

user_router = APIRouter(
    tags=['회원']
)


@user_router.get('/signup', name='회원가입 페이지')
def signup_page(request: Request):
    return templates.TemplateResponse(request, 'signup.html', {'user': None})


@user_router.post('/signup', name='회원가입')
def signup(username: Annotated[str, Form()],
           password: Annotated[str, Form()],
           role: Annotated[Optional[Role], Form()] = None,
           db: Session = Depends(get_db)):
    """
    새로운 회원을 만들고 로그인 페이지로 이동합니다. `role`이 주어지지 않으면 `user`로 가입합니다.
    """
    user_service = UserService(db)
    user_service.signup(SignupUser(username=username, password=password, role=role or Role.USER))
    return RedirectResponse('/login', status_code=status.HTTP_302_FOUND)


@user_router.get('/login', name='로그인 페이지')
def login_page(request: Request):
    return templates.TemplateResponse(request, 'login.html', {'user': None})


@user_router.post('/login', name='로그인')
def login(username: Annotated[str, Form()] = '',
          password: Annotated[str, Form()] = '',
          store: SessionStore = Depends(get_session_store),
          db: Session = Depends(get_db)):
    """
    입력한 `username`과 `password`로 로그인을 합니다. 성공하면 세션 쿠키를 발급하고 홈으로 이동합니다.
    """
    user_service = UserService(db)
    session_id = user_service.login(LoginUser(username=username, password=password), store)

    response = RedirectResponse('/', status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        config.SESSION_COOKIE_NAME,
        encode_session_token(session_id),
        max_age=config.SESSION_MAX_AGE,
        httponly=True,
        samesite='lax',
        secure=config.IS_PRODUCTION,
    )
    return response


@user_router.get('/logout', name='로그아웃')
def logout(session_id: Annotated[Optional[str], Depends(get_session_id)],
           store: Annotated[SessionStore, Depends(get_session_store)]):
    if session_id is not None:
        store.destroy(session_id)
        logger.info('Session destroyed on logout')

    response = RedirectResponse('/', status_code=status.HTTP_302_FOUND)
    response.delete_cookie(config.SESSION_COOKIE_NAME, httponly=True, samesite='lax', secure=config.IS_PRODUCTION)
    return response
