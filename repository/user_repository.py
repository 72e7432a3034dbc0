from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from db.models import User
from exceptions import UsernameTakenError
from schemas.user import UserBase, SessionUser
from typing import Optional


class UserRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_username(self, username: str) -> Optional[SessionUser]:
        user = self.session.query(User).filter_by(username=username).first()
        if user is None:
            return None
        return SessionUser(**user.__dict__)

    def exist_by_username(self, username: str) -> bool:
        user = self.session.query(User.id).filter_by(username=username).first()
        return user is not None

    def create(self, username: str, hashed_password: str, role: str) -> UserBase:
        user = User(username=username, password=hashed_password, role=role)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise UsernameTakenError(username) from e
        self.session.refresh(user)

        return UserBase(id=user.id, username=user.username, role=user.role)
