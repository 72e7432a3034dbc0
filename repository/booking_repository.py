from sqlalchemy.orm import Session
from db.models import Booking
from schemas.booking import BookingBase


class BookingRepository:
    def __init__(self, session: Session):
        self.session = session

    def create(self, user_id: int, event_id: int) -> BookingBase:
        booking = Booking(user_id=user_id, event_id=event_id)
        self.session.add(booking)
        self.session.commit()
        self.session.refresh(booking)

        return BookingBase(id=booking.id, user_id=booking.user_id, event_id=booking.event_id)
