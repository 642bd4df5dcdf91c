from collections.abc import Generator
from datetime import date

from sqlalchemy.orm import Session

from getfit.db.session import SessionLocal
from getfit.services import schedule


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_today() -> date:
    """Today's date in the configured timezone."""
    return schedule.today()
