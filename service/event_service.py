import logging

from sqlalchemy.orm import Session
from repository.event_repository import EventRepository
from typing import List, Optional
from schemas.event import EventBase, CreateEvent
from schemas.user import Role, SessionUser

logger = logging.getLogger(__name__)


class EventService:
    def __init__(self, session: Session):
        self.repository = EventRepository(session)

    def get_events(self, current_user: Optional[SessionUser]) -> List[EventBase]:
        """
        어드민은 모든 이벤트를, 일반 회원은 자신이 만든 이벤트만 날짜순으로 조회합니다.
        로그인하지 않은 경우 빈 리스트를 반환합니다.
        """
        if current_user is None:
            return []

        if current_user.role == Role.ADMIN:
            return self.repository.get_all()

        return self.repository.get_by_user_id(current_user.id)

    def get_all_events(self) -> List[EventBase]:
        return self.repository.get_all()

    def create_event(self, new_event: CreateEvent, owner: Optional[SessionUser] = None) -> EventBase:
        event = self.repository.create(new_event, owner.id if owner else None)
        logger.info('Event %s created by %s', event.id, owner.username if owner else 'admin panel')
        return event

    def delete_event(self, event_id: int) -> bool:
        deleted = self.repository.delete_by_id(event_id)
        if deleted:
            logger.info('Event %s deleted', event_id)
        else:
            logger.info('Event %s not found, nothing deleted', event_id)
        return bool(deleted)
