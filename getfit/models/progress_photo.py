from datetime import datetime, timezone

from sqlalchemy import Column, Date, DateTime, String, Text

from getfit.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProgressPhoto(Base):
    __tablename__ = "progress_photos"

    id = Column(String, primary_key=True)
    date = Column(Date, nullable=False, index=True)
    data_url = Column(Text, nullable=False)
    note = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
