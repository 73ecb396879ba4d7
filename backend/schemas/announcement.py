"""Request and response bodies for the announcement endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateAnnouncementRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    message: str | None = None
    type: str | None = None
    posted_by: str | None = Field(default=None, alias="postedBy")


class AnnouncementResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    message: str
    type: str | None = None
    posted_by: str | None = None
    timestamp: datetime | None = None


class CreateAnnouncementResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    announcement: AnnouncementResponse
    recipient_count: int = Field(alias="recipientCount")
