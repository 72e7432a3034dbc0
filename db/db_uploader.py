"""
어드민 계정을 만드는 데 사용됩니다. `ADMIN_USERNAME`, `ADMIN_PASSWORD` 환경 변수에서 값을 가져옵니다.
"""

import logging

import config
from db.database import SessionLocal
from repository.user_repository import UserRepository
from schemas.user import Role
from util import hash_password

logger = logging.getLogger(__name__)


def init_data():
    # 테스트 실행 시에는 사전 데이터 실행 스킵
    if config.ENVIRONMENT == 'test':
        return

    if not config.ADMIN_USERNAME or not config.ADMIN_PASSWORD:
        return

    with SessionLocal() as session:
        repository = UserRepository(session)
        if repository.exist_by_username(config.ADMIN_USERNAME):
            return

        repository.create(config.ADMIN_USERNAME, hash_password(config.ADMIN_PASSWORD), Role.ADMIN.value)
        logger.info('Admin account %s created', config.ADMIN_USERNAME)
