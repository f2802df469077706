"""
Saved workouts service.

Keeps up to ``SAVED_WORKOUT_SLOTS`` named plan snapshots in numbered
slots, persisted together under a single key.  Saving into an occupied
slot replaces it.
"""

import logging
from typing import Optional

from fastapi import HTTPException, status
from pydantic import TypeAdapter, ValidationError

from fitform.core.config import settings
from fitform.schemas.plan import WorkoutPlan
from fitform.schemas.saved_workout import SavedWorkout, SlotResponse
from fitform.storage.base import KeyValueStore

logger = logging.getLogger(__name__)

SAVED_WORKOUTS_KEY = "SavedWorkouts"

_saved_list = TypeAdapter(list[SavedWorkout])


class SavedWorkoutsService:
    """Slot management for saved plans."""

    def __init__(self, store: KeyValueStore, max_slots: Optional[int] = None):
        self.store = store
        self.max_slots = max_slots or settings.SAVED_WORKOUT_SLOTS

    def list_saved(self) -> list[SavedWorkout]:
        raw = self.store.get(SAVED_WORKOUTS_KEY, [])
        try:
            saved = _saved_list.validate_python(raw)
        except ValidationError:
            logger.warning("Stored saved workouts are malformed, ignoring them")
            return []
        return sorted(saved, key=lambda s: s.slot_number)

    def save_workout(self, plan: WorkoutPlan, slot: int, name: str) -> SavedWorkout:
        self._check_slot(slot)
        saved = [s for s in self.list_saved() if s.slot_number != slot]
        entry = SavedWorkout(workout_plan=plan, slot_number=slot, name=name)
        saved.append(entry)
        saved.sort(key=lambda s: s.slot_number)
        self._write(saved[-self.max_slots:])
        logger.info("Saved plan %r to slot %d", plan.title, slot)
        return entry

    def delete_workout(self, slot: int) -> None:
        self._check_slot(slot)
        saved = self.list_saved()
        remaining = [s for s in saved if s.slot_number != slot]
        if len(remaining) == len(saved):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Slot {slot} is empty")
        self._write(remaining)

    def load_workout(self, slot: int) -> SavedWorkout:
        self._check_slot(slot)
        for entry in self.list_saved():
            if entry.slot_number == slot:
                return entry
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Slot {slot} is empty")

    def get_available_slots(self) -> list[int]:
        used = {s.slot_number for s in self.list_saved()}
        return [slot for slot in range(1, self.max_slots + 1) if slot not in used]

    def get_all_slots(self) -> list[SlotResponse]:
        by_slot = {s.slot_number: s for s in self.list_saved()}
        return [SlotResponse(slot=slot, workout=by_slot.get(slot)) for slot in range(1, self.max_slots + 1)]

    def delete_all(self) -> None:
        self.store.remove(SAVED_WORKOUTS_KEY)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_slot(self, slot: int) -> None:
        if not 1 <= slot <= self.max_slots:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Slot must be between 1 and {self.max_slots}",
            )

    def _write(self, saved: list[SavedWorkout]) -> None:
        self.store.set(SAVED_WORKOUTS_KEY, _saved_list.dump_python(saved, mode="json"))
