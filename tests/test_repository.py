from tests.test_main import test_db, test_db_with_users, TestingSessionLocal
from db.models import User
from exceptions import UsernameTakenError
from repository.user_repository import UserRepository
import pytest


class TestUserRepository:
    def test_create_should_raise_username_taken_on_unique_violation(self, test_db_with_users):
        with TestingSessionLocal() as session:
            repository = UserRepository(session)

            with pytest.raises(UsernameTakenError) as exc_info:
                repository.create('user 1', 'hashed password', 'user')

            assert exc_info.value.username == 'user 1'
            # session was rolled back and stays usable
            assert repository.exist_by_username('user 1')
            assert session.query(User).filter_by(username='user 1').count() == 1

    def test_create_should_return_saved_user(self, test_db):
        with TestingSessionLocal() as session:
            repository = UserRepository(session)

            user = repository.create('new user', 'hashed password', 'admin')

        assert user.username == 'new user'
        assert user.role == 'admin'
        assert user.id is not None
