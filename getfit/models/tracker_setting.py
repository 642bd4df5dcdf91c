from sqlalchemy import Column, String, DateTime, func

from getfit.db.base import Base


class TrackerSetting(Base):
    __tablename__ = "tracker_settings"

    key = Column(String, primary_key=True)
    value = Column(String, nullable=False)

    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
