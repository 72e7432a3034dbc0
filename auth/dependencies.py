from typing import Annotated, Optional

from fastapi import Depends, Request

import config
from auth.session_store import SessionStore, get_session_store
from exceptions import AccessDeniedError, LoginRequiredError
from schemas.user import Role, SessionUser
from util import decode_session_token


def get_session_id(request: Request) -> Optional[str]:
    token = request.cookies.get(config.SESSION_COOKIE_NAME)
    if not token:
        return None
    return decode_session_token(token)


def get_current_user(session_id: Annotated[Optional[str], Depends(get_session_id)],
                     store: Annotated[SessionStore, Depends(get_session_store)]) -> Optional[SessionUser]:
    if session_id is None:
        return None
    return store.get(session_id)


def require_login(current_user: Annotated[Optional[SessionUser], Depends(get_current_user)]) -> SessionUser:
    """
    로그인하지 않은 경우 `LoginRequiredError`를 발생시킵니다. `/login`으로 리다이렉트 됩니다.
    """
    if current_user is None:
        raise LoginRequiredError()
    return current_user


def require_role(role: Role):
    """
    `role` 권한을 가진 회원만 통과시키는 dependency를 만듭니다.
    """

    def role_checker(current_user: Annotated[SessionUser, Depends(require_login)]) -> SessionUser:
        if current_user.role != role:
            raise AccessDeniedError(role.value)
        return current_user

    return role_checker


require_admin = require_role(Role.ADMIN)
