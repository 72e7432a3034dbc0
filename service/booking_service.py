import logging

from sqlalchemy.orm import Session
from repository.booking_repository import BookingRepository
from schemas.booking import BookingBase
from schemas.user import SessionUser

logger = logging.getLogger(__name__)


class BookingService:
    def __init__(self, session: Session):
        self.repository = BookingRepository(session)

    def book_event(self, current_user: SessionUser, event_id: int) -> BookingBase:
        booking = self.repository.create(current_user.id, event_id)
        logger.info('User %s booked event %s', current_user.username, event_id)
        return booking
