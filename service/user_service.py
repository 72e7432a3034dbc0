import logging

from sqlalchemy.orm import Session
from schemas.user import UserBase, SignupUser, LoginUser, SessionUser
from repository.user_repository import UserRepository
from auth.session_store import SessionStore
from exceptions import UsernameTakenError, InvalidCredentialsError

from util import hash_password, verify_password

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, session: Session):
        self.repository = UserRepository(session)

    def signup(self, new_user: SignupUser) -> UserBase:
        """
        새로운 회원을 만듭니다. 이미 사용 중인 아이디라면 `UsernameTakenError`를 발생시킵니다.
        """
        if self.repository.exist_by_username(new_user.username):
            raise UsernameTakenError(new_user.username)

        user = self.repository.create(new_user.username, hash_password(new_user.password), new_user.role.value)
        logger.info('User %s signed up with role %s', user.username, user.role.value)
        return user

    def authenticate(self, login_user: LoginUser) -> SessionUser:
        user = self.repository.get_by_username(login_user.username)

        if user is None or not verify_password(login_user.password, user.password):
            logger.warning('Failed login attempt for %s', login_user.username)
            raise InvalidCredentialsError()

        return user

    def login(self, login_user: LoginUser, store: SessionStore) -> str:
        """
        아이디와 비밀번호를 확인하고 세션을 만듭니다. 만들어진 세션 아이디를 반환합니다.
        """
        user = self.authenticate(login_user)
        session_id = store.create(user)
        logger.info('User %s logged in', user.username)
        return session_id
