import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EventBase(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: int
    title: str
    date: datetime.date
    location: str
    user_id: Optional[int] = None


class CreateEvent(BaseModel):
    model_config = ConfigDict(extra='ignore')

    title: str = Field(description='이벤트 이름', examples=['Spring Meetup'])
    date: datetime.date = Field(description='이벤트 날짜', examples=['2025-02-20'])
    location: str = Field(description='이벤트 장소', examples=['Seoul'])
