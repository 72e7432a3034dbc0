from pydantic import BaseModel, ConfigDict


class BookingBase(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: int
    user_id: int
    event_id: int
