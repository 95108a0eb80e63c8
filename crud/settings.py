import uuid
from typing import Any, List, Optional

from sqlalchemy import JSON
from sqlalchemy.orm import Session

from models.settings import Setting, utcnow

UID_PREFIX = "settings_"


def generate_uid() -> str:
    return f"{UID_PREFIX}{uuid.uuid4().hex}"


def _as_column_value(data: Any):
    # A bare None would be written as SQL NULL and violate NOT NULL
    return JSON.NULL if data is None else data


def create_setting(db: Session, data: Any) -> Setting:
    now = utcnow()
    setting = Setting(
        uid=generate_uid(),
        data=_as_column_value(data),
        created_at=now,
        updated_at=now,
    )
    db.add(setting)
    db.commit()
    db.refresh(setting)
    return setting


def count_settings(db: Session) -> int:
    return db.query(Setting).count()


def list_settings(db: Session, offset: int = 0, limit: int = 10) -> List[Setting]:
    return (
        db.query(Setting)
        .order_by(Setting.created_at.desc(), Setting.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )


def get_setting(db: Session, uid: str) -> Optional[Setting]:
    return db.query(Setting).filter(Setting.uid == uid).first()


def update_setting(db: Session, uid: str, data: Any) -> Optional[Setting]:
    setting = get_setting(db, uid)
    if setting is None:
        return None
    setting.data = _as_column_value(data)
    setting.updated_at = utcnow()
    db.commit()
    db.refresh(setting)
    return setting


def delete_setting(db: Session, uid: str) -> int:
    """Remove the record with ``uid``; returns how many rows went away."""
    deleted = db.query(Setting).filter(Setting.uid == uid).delete(
        synchronize_session=False
    )
    db.commit()
    return deleted
