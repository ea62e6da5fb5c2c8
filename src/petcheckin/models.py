"""Check-in record shared across the petcheckin package."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Literal


PetType = Literal["dog", "cat"]

PET_TYPES: tuple[PetType, ...] = ("dog", "cat")


@dataclass
class CheckInRecord:
    """One pet's stay details plus the facility's space counters.

    Every field is public and assigned verbatim; nothing is validated.
    ``pet_type`` is meant to be one of :data:`PET_TYPES` but any string
    is stored as given.
    """

    pet_type: str
    pet_name: str
    pet_age: int
    dog_spaces: int
    cat_spaces: int
    days_stay: int
    amount_due: float

    def to_dict(self) -> dict:
        return asdict(self)

    def to_receipt(self) -> dict:
        """Pet-facing view: capacity counters are left out."""
        return {
            "pet_type": self.pet_type,
            "pet_name": self.pet_name,
            "pet_age": self.pet_age,
            "days_stay": self.days_stay,
            "amount_due": self.amount_due,
        }
