"""
환경 변수에서 애플리케이션 설정을 읽어옵니다. production 환경이 아닌 경우에만 `.env` 파일을 사용합니다.
"""

import os

from dotenv import load_dotenv

ENVIRONMENT = os.environ.get('ENVIRONMENT', 'development')
IS_PRODUCTION = ENVIRONMENT == 'production'

if not IS_PRODUCTION:
    load_dotenv()

DATABASE_URL = os.environ.get('DATABASE_URL')
DB_HOST = os.environ.get('DB_HOST')
DB_PORT = int(os.environ.get('DB_PORT', 5432))
DB_USER = os.environ.get('DB_USER')
DB_PASSWORD = os.environ.get('DB_PASSWORD')
DB_NAME = os.environ.get('DB_NAME')
DB_POOL_SIZE = int(os.environ.get('DB_POOL_SIZE', 5))

SESSION_SECRET = os.environ.get('SESSION_SECRET')
if not SESSION_SECRET:
    if IS_PRODUCTION:
        raise RuntimeError('SESSION_SECRET must be set in production')
    SESSION_SECRET = 'dev-session-secret'

SESSION_MAX_AGE = int(os.environ.get('SESSION_MAX_AGE', 60 * 60 * 24))
SESSION_COOKIE_NAME = os.environ.get('SESSION_COOKIE_NAME', 'session_id')

BCRYPT_ROUNDS = int(os.environ.get('BCRYPT_ROUNDS', 10))

PORT = int(os.environ.get('PORT', 3000))
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME')
ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')
