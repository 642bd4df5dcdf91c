from sqlalchemy import Column, Date, Float, String

from getfit.db.base import Base


class WeightEntry(Base):
    __tablename__ = "weight_entries"

    date = Column(Date, primary_key=True)
    weight = Column(Float, nullable=False)
    unit = Column(String, nullable=False, default="kg")  # kg / lbs
