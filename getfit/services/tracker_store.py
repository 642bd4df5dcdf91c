"""
Server-side tracker state: phase offset, workout completion and status,
weight, daily notes and progress photos.

Every store is keyed by calendar date with one entry per date; writes
replace the previous value. Each mutation is committed immediately.
"""
import logging
import math
import time
import uuid
from datetime import date
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from getfit.models.daily_note import DailyNote
from getfit.models.progress_photo import ProgressPhoto
from getfit.models.tracker_setting import TrackerSetting
from getfit.models.weight_entry import WeightEntry
from getfit.models.workout_log import WorkoutCompletion, WorkoutStatusEntry
from getfit.services.schedule import CYCLE_LENGTH

logger = logging.getLogger(__name__)

OFFSET_KEY = "today_workout_index"

WORKOUT_STATUSES = ("done", "rest", "missed")
WEIGHT_UNITS = ("kg", "lbs")
MOODS = ("great", "good", "okay", "tired", "sore")

MAX_PHOTO_BYTES = 5 * 1024 * 1024


def date_key(day: date) -> str:
    return day.strftime("%Y-%m-%d")


# ---------- PHASE OFFSET ----------


def get_offset(db: Session) -> int:
    """Stored phase offset, 0 when missing or out of range."""
    row = db.get(TrackerSetting, OFFSET_KEY)
    if row is None:
        return 0
    try:
        value = int(row.value)
    except (TypeError, ValueError):
        logger.warning(f"[TRACKER] Ignoring invalid stored offset {row.value!r}")
        return 0
    if 0 <= value < CYCLE_LENGTH:
        return value
    return 0


def set_offset(db: Session, offset: int) -> int:
    if not 0 <= offset < CYCLE_LENGTH:
        raise ValueError(f"Offset must be between 0 and {CYCLE_LENGTH - 1}")

    row = db.get(TrackerSetting, OFFSET_KEY)
    if row is None:
        row = TrackerSetting(key=OFFSET_KEY, value=str(offset))
        db.add(row)
    else:
        row.value = str(offset)
    db.commit()
    logger.info(f"[TRACKER] Phase offset set to {offset}")
    return offset


# ---------- WORKOUT COMPLETION / STATUS ----------


def list_completions(db: Session) -> Dict[str, bool]:
    return {date_key(row.date): True for row in db.query(WorkoutCompletion).all()}


def is_completed(db: Session, day: date) -> bool:
    return db.get(WorkoutCompletion, day) is not None


def _mark_completed(db: Session, day: date, completed: bool) -> None:
    row = db.get(WorkoutCompletion, day)
    if completed and row is None:
        db.add(WorkoutCompletion(date=day))
    elif not completed and row is not None:
        db.delete(row)


def toggle_completion(db: Session, day: date) -> bool:
    """Flip completion for ``day`` and return the new state."""
    completed = not is_completed(db, day)
    _mark_completed(db, day, completed)
    db.commit()
    return completed


def list_statuses(db: Session) -> Dict[str, str]:
    return {date_key(row.date): row.status for row in db.query(WorkoutStatusEntry).all()}


def get_status(db: Session, day: date) -> Optional[str]:
    row = db.get(WorkoutStatusEntry, day)
    return row.status if row else None


def set_status(db: Session, day: date, status: Optional[str]) -> Optional[str]:
    """
    Set or clear the workout status for ``day``.

    Completion follows the status: ``done`` marks the day completed, any
    other value (including clearing) removes the completion.
    """
    if status is not None and status not in WORKOUT_STATUSES:
        raise ValueError(f"Unknown workout status: {status}")

    row = db.get(WorkoutStatusEntry, day)
    if status is None:
        if row is not None:
            db.delete(row)
    elif row is None:
        db.add(WorkoutStatusEntry(date=day, status=status))
    else:
        row.status = status

    _mark_completed(db, day, status == "done")
    db.commit()
    return status


# ---------- WEIGHT ----------


def set_weight(db: Session, day: date, weight: float, unit: str, today_date: date) -> WeightEntry:
    if weight is None or not math.isfinite(weight) or weight <= 0:
        raise ValueError("Please enter a valid number")
    if unit not in WEIGHT_UNITS:
        raise ValueError(f"Unknown weight unit: {unit}")
    if day > today_date:
        raise ValueError("Cannot log weight for future dates")

    entry = db.get(WeightEntry, day)
    if entry is None:
        entry = WeightEntry(date=day, weight=weight, unit=unit)
        db.add(entry)
    else:
        entry.weight = weight
        entry.unit = unit
    db.commit()
    db.refresh(entry)
    return entry


def get_weight(db: Session, day: date) -> Optional[WeightEntry]:
    return db.get(WeightEntry, day)


def list_weights(db: Session) -> List[WeightEntry]:
    return db.query(WeightEntry).order_by(WeightEntry.date.asc()).all()


# ---------- DAILY NOTES ----------


def set_note(db: Session, day: date, note: str, mood: Optional[str] = None) -> DailyNote:
    text = (note or "").strip()
    if not text:
        raise ValueError("Please write something first")
    if mood is not None and mood not in MOODS:
        raise ValueError(f"Unknown mood: {mood}")

    entry = db.get(DailyNote, day)
    if entry is None:
        entry = DailyNote(date=day, note=text, mood=mood)
        db.add(entry)
    else:
        entry.note = text
        entry.mood = mood
    db.commit()
    db.refresh(entry)
    return entry


def get_note(db: Session, day: date) -> Optional[DailyNote]:
    return db.get(DailyNote, day)


def list_notes(db: Session) -> List[DailyNote]:
    return db.query(DailyNote).order_by(DailyNote.date.asc()).all()


# ---------- PROGRESS PHOTOS ----------


def data_url_size(data_url: str) -> int:
    """Approximate decoded size in bytes of a base64 data URL."""
    payload = data_url.split(",", 1)[1] if "," in data_url else data_url
    payload = payload.strip()
    padding = payload.count("=", max(0, len(payload) - 2))
    return max(0, len(payload) * 3 // 4 - padding)


def _new_photo_id() -> str:
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}"


def add_photo(db: Session, data_url: str, day: date, note: Optional[str] = None) -> ProgressPhoto:
    if not data_url:
        raise ValueError("No image provided")
    if data_url_size(data_url) > MAX_PHOTO_BYTES:
        raise ValueError("Please upload an image under 5MB")

    photo = ProgressPhoto(
        id=_new_photo_id(),
        date=day,
        data_url=data_url,
        note=note or None,
    )
    db.add(photo)
    db.commit()
    db.refresh(photo)
    logger.info(f"[TRACKER] Stored progress photo {photo.id} for {date_key(day)}")
    return photo


def list_photos(db: Session) -> List[ProgressPhoto]:
    return (
        db.query(ProgressPhoto)
        .order_by(ProgressPhoto.created_at.desc(), ProgressPhoto.id.desc())
        .all()
    )


def delete_photo(db: Session, photo_id: str) -> bool:
    photo = db.get(ProgressPhoto, photo_id)
    if photo is None:
        return False
    db.delete(photo)
    db.commit()
    return True
