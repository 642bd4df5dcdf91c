"""
Tracker endpoints: workout completion and status, weight, daily notes,
progress photos and 30-day progress statistics.
"""
import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from getfit.deps import get_db, get_today
from getfit.schemas.tracker import (
    CompletionsRead,
    CompletionToggle,
    NoteRead,
    NoteUpdate,
    PhotoCreate,
    PhotoRead,
    ProgressSummary,
    StatusesRead,
    StatusRead,
    StatusUpdate,
    WeightRead,
    WeightUpdate,
)
from getfit.services import tracker_store
from getfit.services.progress import progress_summary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["tracker"])


# ---------- WORKOUTS ----------


@router.get("/tracker/completions", response_model=CompletionsRead)
def list_completions(db: Session = Depends(get_db)):
    return CompletionsRead(completed=tracker_store.list_completions(db))


@router.post("/tracker/completions/{day}/toggle", response_model=CompletionToggle)
def toggle_completion(day: date, db: Session = Depends(get_db)):
    completed = tracker_store.toggle_completion(db, day)
    return CompletionToggle(date=day, completed=completed)


@router.get("/tracker/statuses", response_model=StatusesRead)
def list_statuses(db: Session = Depends(get_db)):
    return StatusesRead(statuses=tracker_store.list_statuses(db))


@router.get("/tracker/status/{day}", response_model=StatusRead)
def get_status(day: date, db: Session = Depends(get_db)):
    return StatusRead(
        date=day,
        status=tracker_store.get_status(db, day),
        completed=tracker_store.is_completed(db, day),
    )


@router.put("/tracker/status/{day}", response_model=StatusRead)
def set_status(day: date, payload: StatusUpdate, db: Session = Depends(get_db)):
    """
    Set done / rest / missed for a day, or clear it with null.
    "done" also marks the workout completed; anything else un-completes it.
    """
    status = tracker_store.set_status(db, day, payload.status)
    return StatusRead(date=day, status=status, completed=tracker_store.is_completed(db, day))


# ---------- WEIGHT ----------


@router.get("/tracker/weights", response_model=List[WeightRead])
def list_weights(db: Session = Depends(get_db)):
    return tracker_store.list_weights(db)


@router.get("/tracker/weights/{day}", response_model=WeightRead)
def get_weight(day: date, db: Session = Depends(get_db)):
    entry = tracker_store.get_weight(db, day)
    if entry is None:
        raise HTTPException(status_code=404, detail="No weight logged for this day")
    return entry


@router.put("/tracker/weights/{day}", response_model=WeightRead)
def set_weight(
    day: date,
    payload: WeightUpdate,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    try:
        entry = tracker_store.set_weight(db, day, payload.weight, payload.unit, today)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info(f"[TRACKER] Weight logged for {day}: {entry.weight} {entry.unit}")
    return entry


# ---------- NOTES ----------


@router.get("/tracker/notes", response_model=List[NoteRead])
def list_notes(db: Session = Depends(get_db)):
    return tracker_store.list_notes(db)


@router.get("/tracker/notes/{day}", response_model=NoteRead)
def get_note(day: date, db: Session = Depends(get_db)):
    note = tracker_store.get_note(db, day)
    if note is None:
        raise HTTPException(status_code=404, detail="No note for this day")
    return note


@router.put("/tracker/notes/{day}", response_model=NoteRead)
def set_note(day: date, payload: NoteUpdate, db: Session = Depends(get_db)):
    try:
        return tracker_store.set_note(db, day, payload.note, payload.mood)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# ---------- PHOTOS ----------


@router.get("/tracker/photos", response_model=List[PhotoRead])
def list_photos(db: Session = Depends(get_db)):
    return tracker_store.list_photos(db)


@router.post("/tracker/photos", response_model=PhotoRead, status_code=201)
def add_photo(
    payload: PhotoCreate,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    try:
        return tracker_store.add_photo(db, payload.data_url, payload.date or today, payload.note)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/tracker/photos/{photo_id}")
def delete_photo(photo_id: str, db: Session = Depends(get_db)):
    if not tracker_store.delete_photo(db, photo_id):
        raise HTTPException(status_code=404, detail="Photo not found")
    return {"deleted": photo_id}


# ---------- PROGRESS ----------


@router.get("/progress", response_model=ProgressSummary)
def get_progress(
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    return progress_summary(db, today)
