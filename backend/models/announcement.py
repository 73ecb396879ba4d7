"""Announcement model definitions."""

from sqlalchemy import Column, DateTime, Integer, String, Text, func
from backend.database import Base


class Announcement(Base):
    """Represents a broadcast message. Rows are never updated."""
    __tablename__ = "announcements"

    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    type = Column(String(50), default="announcement", server_default="announcement")
    posted_by = Column(String(255))
    timestamp = Column(DateTime, server_default=func.now())
