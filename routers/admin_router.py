import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request
from fastapi.params import Path
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
from starlette import status

from auth.dependencies import require_admin
from db.database import get_db
from routers.templates import templates
from schemas.event import CreateEvent
from schemas.user import SessionUser
from service.event_service import EventService

admin_router = APIRouter(
    prefix='/admin',
    tags=['어드민']
)


@admin_router.get('', name='어드민 페이지')
def admin_page(request: Request,
               current_user: Annotated[SessionUser, Depends(require_admin)],
               db: Session = Depends(get_db)):
    """
    작성자와 관계없이 모든 이벤트를 보여줍니다.
    어드민 전용 페이지 입니다.
    """
    event_service = EventService(db)
    events = event_service.get_all_events()
    return templates.TemplateResponse(request, 'admin.html', {'user': current_user, 'events': events})


@admin_router.post('/add', name='어드민 이벤트 생성', dependencies=[Depends(require_admin)])
def add_event(title: Annotated[str, Form()],
              date: Annotated[datetime.date, Form()],
              location: Annotated[str, Form()],
              db: Session = Depends(get_db)):
    """
    작성자가 없는 이벤트를 만듭니다.
    """
    event_service = EventService(db)
    event_service.create_event(CreateEvent(title=title, date=date, location=location))
    return RedirectResponse('/admin', status_code=status.HTTP_302_FOUND)


@admin_router.post('/delete/{event_id}', name='어드민 이벤트 삭제', dependencies=[Depends(require_admin)])
def delete_event(db: Session = Depends(get_db),
                 event_id: int = Path(..., description='삭제할 이벤트의 `id`')):
    """
    이벤트를 삭제합니다. 존재하지 않는 `id`라면 아무것도 하지 않습니다.
    """
    event_service = EventService(db)
    event_service.delete_event(event_id)
    return RedirectResponse('/admin', status_code=status.HTTP_302_FOUND)
