"""Admin model definitions."""

from sqlalchemy import Column, DateTime, Integer, String, func
from backend.database import Base


class Admin(Base):
    """Represents an announcement-posting administrator."""
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True)
    username = Column(String(100), unique=True, nullable=False)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
