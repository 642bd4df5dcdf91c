from sqlalchemy import Column, Date, String

from getfit.db.base import Base


class WorkoutCompletion(Base):
    __tablename__ = "workout_completions"

    # одна запись на день, наличие строки = тренировка выполнена
    date = Column(Date, primary_key=True)


class WorkoutStatusEntry(Base):
    __tablename__ = "workout_statuses"

    date = Column(Date, primary_key=True)
    status = Column(String, nullable=False)  # done / rest / missed
