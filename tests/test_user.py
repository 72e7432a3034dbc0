from tests.test_main import client, test_db, test_db_with_users, UtilTest, TestingSessionLocal, USER_PASSWORD
from auth.session_store import session_store
from db.models import User
from util import verify_password

import config
import pytest


class TestUserRoute:
    class TestSignup:
        def test_signup_page_should_render_form(self, client, test_db):
            response = client.get('/signup')

            assert response.status_code == 200, response.text
            assert 'name="username"' in response.text

        def test_signup_should_create_user_with_hashed_password(self, client, test_db):
            response = client.post(
                '/signup',
                data={'username': 'new user', 'password': 'secret password'},
                follow_redirects=False
            )

            assert response.status_code == 302, response.text
            assert response.headers['location'] == '/login'

            with TestingSessionLocal() as session:
                users = session.query(User).filter_by(username='new user').all()

            assert len(users) == 1
            assert users[0].role == 'user'
            assert users[0].password != 'secret password'
            assert verify_password('secret password', users[0].password)

        def test_signup_should_keep_given_admin_role(self, client, test_db):
            client.post(
                '/signup',
                data={'username': 'new admin', 'password': 'secret', 'role': 'admin'},
                follow_redirects=False
            )

            with TestingSessionLocal() as session:
                user = session.query(User).filter_by(username='new admin').one()

            assert user.role == 'admin'

        def test_signup_should_treat_empty_role_as_user(self, client, test_db):
            client.post(
                '/signup',
                data={'username': 'new user', 'password': 'secret', 'role': ''},
                follow_redirects=False
            )

            with TestingSessionLocal() as session:
                user = session.query(User).filter_by(username='new user').one()

            assert user.role == 'user'

        def test_signup_should_return_422_for_unknown_role(self, client, test_db):
            response = client.post(
                '/signup',
                data={'username': 'new user', 'password': 'secret', 'role': 'superuser'},
                follow_redirects=False
            )

            assert response.status_code == 422, response.text

        def test_signup_should_return_422_when_form_not_have_required_fields(self, client, test_db):
            response = client.post('/signup', data={'username': 'new user'})

            assert response.status_code == 422, response.text

        def test_signup_twice_with_same_username_should_keep_one_user(self, client, test_db):
            data = {'username': 'same user', 'password': 'secret'}

            first = client.post('/signup', data=data, follow_redirects=False)
            second = client.post('/signup', data=data, follow_redirects=False)

            assert first.status_code == 302
            assert second.status_code == 200
            assert 'Username already taken' in second.text
            assert "<a href='/signup'>" in second.text

            with TestingSessionLocal() as session:
                assert session.query(User).filter_by(username='same user').count() == 1

    class TestLogin:
        def test_login_page_should_render_form(self, client, test_db):
            response = client.get('/login')

            assert response.status_code == 200, response.text
            assert 'action="/login"' in response.text

        def test_login_should_create_session_and_redirect_home(self, client, test_db_with_users):
            response = UtilTest.login(client, 'user 1')

            assert response.status_code == 302, response.text
            assert response.headers['location'] == '/'
            assert config.SESSION_COOKIE_NAME in response.cookies
            assert len(session_store) == 1

            home = client.get('/')
            assert 'Logged in as user 1' in home.text

        def test_login_should_reject_wrong_password(self, client, test_db_with_users):
            response = UtilTest.login(client, 'user 1', 'wrong password')

            assert response.status_code == 200, response.text
            assert 'Invalid credentials' in response.text
            assert config.SESSION_COOKIE_NAME not in response.cookies
            assert len(session_store) == 0

            home = client.get('/')
            assert 'Logged in as' not in home.text

        def test_login_should_reject_unknown_username(self, client, test_db_with_users):
            response = UtilTest.login(client, 'invalid id')

            assert response.status_code == 200, response.text
            assert 'Invalid credentials' in response.text

        @pytest.mark.parametrize("username, password", [('user 1', ''), ('', USER_PASSWORD), ('', '')])
        def test_login_should_reject_empty_fields(self, username, password, client, test_db_with_users):
            response = UtilTest.login(client, username, password)

            assert response.status_code == 200, response.text
            assert response.text == "Invalid credentials. <a href='/login'>Try again</a>"
            assert len(session_store) == 0

        def test_signup_then_login_round_trip(self, client, test_db):
            client.post('/signup', data={'username': 'fresh', 'password': 'pw'}, follow_redirects=False)

            response = UtilTest.login(client, 'fresh', 'pw')

            assert response.status_code == 302, response.text
            assert 'Logged in as fresh' in client.get('/').text

    class TestLogout:
        def test_logout_should_destroy_session(self, client, test_db_with_users):
            UtilTest.login(client, 'user 1')
            assert len(session_store) == 1

            response = client.get('/logout', follow_redirects=False)

            assert response.status_code == 302, response.text
            assert response.headers['location'] == '/'
            assert len(session_store) == 0

            response = client.get('/create-event', follow_redirects=False)
            assert response.status_code == 302
            assert response.headers['location'] == '/login'

        def test_logout_without_session_should_redirect_home(self, client, test_db):
            response = client.get('/logout', follow_redirects=False)

            assert response.status_code == 302, response.text
            assert response.headers['location'] == '/'

        def test_old_cookie_should_not_work_after_logout(self, client, test_db_with_users):
            login = UtilTest.login(client, 'user 1')
            token = login.cookies[config.SESSION_COOKIE_NAME]

            client.get('/logout', follow_redirects=False)
            client.cookies.clear()
            client.cookies.set(config.SESSION_COOKIE_NAME, token)

            response = client.get('/admin', follow_redirects=False)
            assert response.status_code == 302
            assert response.headers['location'] == '/login'
