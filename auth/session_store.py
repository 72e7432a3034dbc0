"""
로그인한 회원의 세션을 관리합니다. 세션 아이디를 키로, 로그인 시점의 회원 정보를 값으로 저장합니다.
"""

import abc
import secrets
import threading
import time
from typing import Callable, Dict, Optional, Tuple

import config
from schemas.user import SessionUser


class SessionStore(abc.ABC):
    @abc.abstractmethod
    def create(self, user: SessionUser) -> str:
        ...

    @abc.abstractmethod
    def get(self, session_id: str) -> Optional[SessionUser]:
        ...

    @abc.abstractmethod
    def destroy(self, session_id: str) -> None:
        ...

    @abc.abstractmethod
    def clear(self) -> None:
        ...


class InMemorySessionStore(SessionStore):
    """
    프로세스 메모리에 세션을 보관하는 저장소입니다. 프로세스가 재시작되면 모든 세션이 사라집니다.
    """

    def __init__(self, max_age: int = config.SESSION_MAX_AGE, clock: Callable[[], float] = time.time):
        self.max_age = max_age
        self.clock = clock
        self._sessions: Dict[str, Tuple[SessionUser, float]] = {}
        self._lock = threading.Lock()

    def create(self, user: SessionUser) -> str:
        session_id = secrets.token_urlsafe(32)
        with self._lock:
            self._sessions[session_id] = (user, self.clock() + self.max_age)
        return session_id

    def get(self, session_id: str) -> Optional[SessionUser]:
        with self._lock:
            entry = self._sessions.get(session_id)
            if entry is None:
                return None

            user, expires_at = entry
            if expires_at <= self.clock():
                del self._sessions[session_id]
                return None

            return user

    def destroy(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __len__(self):
        with self._lock:
            return len(self._sessions)


session_store = InMemorySessionStore()


def get_session_store() -> SessionStore:
    return session_store
