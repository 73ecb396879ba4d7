import logging

from sqlalchemy.orm import Session

from backend.core.errors import ValidationError
from backend.models.announcement import Announcement
from backend.schemas.announcement import CreateAnnouncementRequest
from backend.services.user_service import count_users

logger = logging.getLogger(__name__)

DEFAULT_TYPE = "announcement"
DEFAULT_POSTED_BY = "Admin"


class AnnouncementService:
    def __init__(self, db: Session):
        self.db = db

    def create(self, data: CreateAnnouncementRequest) -> tuple[Announcement, int]:
        """Store an announcement and report how many users it would reach.

        Nothing is dispatched; the recipient count is the number of user rows
        at the time of posting.
        """
        title = (data.title or "").strip()
        message = (data.message or "").strip()
        if not title or not message:
            raise ValidationError("Title and message are required")

        announcement = Announcement(
            title=title,
            message=message,
            type=data.type or DEFAULT_TYPE,
            posted_by=data.posted_by or DEFAULT_POSTED_BY,
        )
        self.db.add(announcement)
        self.db.commit()
        self.db.refresh(announcement)

        recipient_count = count_users(self.db)
        logger.info("Announcement %s posted to %d recipients", announcement.id, recipient_count)
        return announcement, recipient_count

    def list_announcements(self) -> list[Announcement]:
        return self.db.query(Announcement).order_by(
            Announcement.timestamp.desc(),
            Announcement.id.desc(),
        ).all()
