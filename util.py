import datetime
from typing import Optional

import bcrypt
import jwt

import config

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


def _encode_password(password: str) -> bytes:
    return password.encode('utf-8')[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(password: str) -> str:
    """
    비밀번호를 bcrypt로 해싱합니다. cost factor는 `BCRYPT_ROUNDS` 환경 변수를 따릅니다.
    """
    salt = bcrypt.gensalt(rounds=config.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_encode_password(password), salt).decode('utf-8')


def verify_password(password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(_encode_password(password), hashed_password.encode('utf-8'))
    except ValueError:
        return False


def encode_session_token(session_id: str, max_age: int = config.SESSION_MAX_AGE) -> str:
    payload = {
        'sid': session_id,
        'exp': datetime.datetime.now(datetime.UTC) + datetime.timedelta(seconds=max_age)
    }
    return jwt.encode(payload, config.SESSION_SECRET, algorithm='HS256')


def decode_session_token(token: str) -> Optional[str]:
    """
    쿠키에 담긴 토큰에서 세션 아이디를 꺼냅니다. 서명이 맞지 않거나 만료된 토큰이면 `None`을 반환합니다.
    """
    try:
        payload = jwt.decode(token, config.SESSION_SECRET, algorithms='HS256')
    except jwt.InvalidTokenError:
        return None
    return payload.get('sid')
