from sqlalchemy import Column, Date, String, Text

from getfit.db.base import Base


class DailyNote(Base):
    __tablename__ = "daily_notes"

    date = Column(Date, primary_key=True)
    note = Column(Text, nullable=False)
    mood = Column(String, nullable=True)  # great / good / okay / tired / sore
