from tests.test_main import USER_PASSWORD
from auth.session_store import InMemorySessionStore
from schemas.user import SessionUser, Role


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def _session_user():
    return SessionUser(id=1, username='user 1', password='hashed ' + USER_PASSWORD, role=Role.USER)


class TestInMemorySessionStore:
    def test_create_and_get(self):
        store = InMemorySessionStore(max_age=60)
        user = _session_user()

        session_id = store.create(user)

        assert store.get(session_id) == user
        assert len(store) == 1

    def test_create_should_return_unique_session_ids(self):
        store = InMemorySessionStore(max_age=60)

        assert store.create(_session_user()) != store.create(_session_user())

    def test_get_unknown_session_should_return_none(self):
        store = InMemorySessionStore(max_age=60)

        assert store.get('unknown') is None

    def test_destroy(self):
        store = InMemorySessionStore(max_age=60)
        session_id = store.create(_session_user())

        store.destroy(session_id)
        store.destroy(session_id)

        assert store.get(session_id) is None
        assert len(store) == 0

    def test_session_should_expire_after_max_age(self):
        clock = FakeClock()
        store = InMemorySessionStore(max_age=60, clock=clock)
        session_id = store.create(_session_user())

        clock.now += 59
        assert store.get(session_id) is not None

        clock.now += 1
        assert store.get(session_id) is None
        assert len(store) == 0

    def test_clear(self):
        store = InMemorySessionStore(max_age=60)
        store.create(_session_user())
        store.create(_session_user())

        store.clear()

        assert len(store) == 0
