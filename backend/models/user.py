"""User model definitions."""

from sqlalchemy import Column, DateTime, Integer, String, func
from backend.database import Base


class User(Base):
    """Represents a registered student."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(255), nullable=False)
    student_id = Column(String(100), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    phone = Column(String(20), nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt digest
    role = Column(String(50), default="student", server_default="student")
    created_at = Column(DateTime, server_default=func.now())
