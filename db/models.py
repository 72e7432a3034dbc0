from sqlalchemy import Column, Integer, String, Date, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from db.database import Base


class User(Base):
    """
    회원을 나타내는 클래스입니다. 일반 회원인지 어드민인지는 `role` 필드로 구분합니다.
    `password`에는 bcrypt 해시만 저장됩니다.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, nullable=False)
    username = Column(String, nullable=False, unique=True)
    password = Column(String, nullable=False)
    role = Column(String, nullable=False, default='user')  # user / admin

    events = relationship('Event', back_populates='owner')
    bookings = relationship('Booking', back_populates='user')

    __table_args__ = (
        CheckConstraint("role IN ('user', 'admin')", name='ck_users_role'),
    )


class Event(Base):
    """
    이벤트를 나타내는 클래스입니다. `user_id`가 비어 있으면 어드민이 만든 이벤트입니다.
    """
    __tablename__ = 'events'

    id = Column(Integer, primary_key=True, nullable=False)
    title = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    location = Column(String, nullable=False)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=True)

    owner = relationship('User', back_populates='events')
    bookings = relationship('Booking', back_populates='event', passive_deletes=True)


class Booking(Base):
    """
    회원의 이벤트 예약을 나타내는 클래스입니다.
    """
    __tablename__ = 'bookings'

    id = Column(Integer, primary_key=True, nullable=False)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False)
    user = relationship('User', back_populates='bookings')
    event_id = Column(Integer, ForeignKey('events.id', ondelete='CASCADE'), nullable=False)
    event = relationship('Event', back_populates='bookings')
