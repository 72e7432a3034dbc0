from fastapi import APIRouter
from routers.user_router import user_router
from routers.event_router import event_router
from routers.admin_router import admin_router

router = APIRouter()

router.include_router(user_router)
router.include_router(event_router)
router.include_router(admin_router)
