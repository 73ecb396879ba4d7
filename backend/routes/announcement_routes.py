from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.auth.dependencies import require_admin
from backend.database import get_db
from backend.schemas.announcement import (
    AnnouncementResponse,
    CreateAnnouncementRequest,
    CreateAnnouncementResponse,
)
from backend.services.announcement_service import AnnouncementService

router = APIRouter(tags=['announcements'])


def get_announcement_service(db: Session = Depends(get_db)) -> AnnouncementService:
    return AnnouncementService(db)


@router.get('', response_model=list[AnnouncementResponse])
def list_announcements(service: AnnouncementService = Depends(get_announcement_service)):
    return service.list_announcements()


@router.post(
    '',
    response_model=CreateAnnouncementResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_announcement(
    data: CreateAnnouncementRequest,
    service: AnnouncementService = Depends(get_announcement_service),
):
    announcement, recipient_count = service.create(data)
    return CreateAnnouncementResponse(
        message='Announcement created successfully',
        announcement=AnnouncementResponse.model_validate(announcement),
        recipient_count=recipient_count,
    )
