from sqlalchemy.orm import Session
from db.models import Event
from schemas.event import EventBase, CreateEvent
from typing import List, Optional


class EventRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> List[EventBase]:
        events = self.session.query(Event).order_by(Event.date.asc(), Event.id.asc()).all()
        return [EventBase(**event.__dict__) for event in events]

    def get_by_user_id(self, user_id: int) -> List[EventBase]:
        events = self.session.query(Event) \
            .filter(Event.user_id == user_id) \
            .order_by(Event.date.asc(), Event.id.asc()) \
            .all()
        return [EventBase(**event.__dict__) for event in events]

    def create(self, data: CreateEvent, user_id: Optional[int] = None) -> EventBase:
        event = Event(**data.model_dump(), user_id=user_id)
        self.session.add(event)
        self.session.commit()
        self.session.refresh(event)

        return EventBase(
            id=event.id,
            title=event.title,
            date=event.date,
            location=event.location,
            user_id=event.user_id
        )

    def delete_by_id(self, _id: int) -> int:
        deleted = self.session.query(Event).filter_by(id=_id).delete(synchronize_session=False)
        self.session.commit()
        return deleted
