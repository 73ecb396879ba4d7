from sqlalchemy import func
from sqlalchemy.orm import Session

from backend.models.user import User


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()


def count_users(db: Session) -> int:
    return db.query(func.count(User.id)).scalar() or 0
