"""Change log endpoints (list, get and create only)."""

from routes.crud import build_crud_router
from services.change_log_service import change_log_service

router = build_crud_router(change_log_service, path="ChangeLog")
