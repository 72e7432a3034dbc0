import datetime
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.params import Path
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
from starlette import status

from auth.dependencies import get_current_user, require_login
from db.database import get_db
from routers.templates import templates
from schemas.event import CreateEvent
from schemas.user import SessionUser
from service.booking_service import BookingService
from service.event_service import EventService

event_router = APIRouter(
    tags=['이벤트']
)


@event_router.get('/', name='홈')
def home(request: Request,
         current_user: Annotated[Optional[SessionUser], Depends(get_current_user)],
         db: Session = Depends(get_db)):
    """
    이벤트 목록을 날짜순으로 보여줍니다.
    어드민의 경우 모든 이벤트를, 일반 회원의 경우 자신이 만든 이벤트만 보여줍니다.
    """
    event_service = EventService(db)
    events = event_service.get_events(current_user)
    return templates.TemplateResponse(request, 'index.html', {'user': current_user, 'events': events})


@event_router.get('/create-event', name='이벤트 생성 페이지')
def create_event_page(request: Request, current_user: Annotated[SessionUser, Depends(require_login)]):
    return templates.TemplateResponse(request, 'create-event.html', {'user': current_user})


@event_router.post('/create-event', name='이벤트 생성')
def create_event(title: Annotated[str, Form()],
                 date: Annotated[datetime.date, Form()],
                 location: Annotated[str, Form()],
                 current_user: Annotated[SessionUser, Depends(require_login)],
                 db: Session = Depends(get_db)):
    event_service = EventService(db)
    event_service.create_event(CreateEvent(title=title, date=date, location=location), owner=current_user)
    return RedirectResponse('/', status_code=status.HTTP_302_FOUND)


@event_router.post('/book/{event_id}', name='이벤트 예약')
def book_event(request: Request,
               current_user: Annotated[SessionUser, Depends(require_login)],
               db: Session = Depends(get_db),
               event_id: int = Path(..., description='예약할 이벤트의 `id`')):
    """
    현재 회원으로 이벤트를 예약하고 예약 확인 페이지를 보여줍니다.
    """
    booking_service = BookingService(db)
    booking = booking_service.book_event(current_user, event_id)
    return templates.TemplateResponse(request, 'confirmation.html',
                                      {'user': current_user, 'event_id': booking.event_id})
