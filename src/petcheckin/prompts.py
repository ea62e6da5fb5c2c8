"""Interactive mutators: ask for a value, store it on the record, echo it back."""

from __future__ import annotations

import logging

from petcheckin.inputs import InputSource
from petcheckin.models import PET_TYPES, CheckInRecord

logger = logging.getLogger(__name__)


def prompt_pet_type(record: CheckInRecord, source: InputSource) -> bool:
    """Ask for the pet type and store it if it is "dog" or "cat".

    Matching is by content and case-sensitive, ignoring surrounding
    whitespace. Anything else prints an error and leaves ``record.pet_type``
    unchanged; there is no retry. Returns True when the field was set.
    """
    answer = source.read_line("Enter pet type: ").strip()
    if answer not in PET_TYPES:
        logger.debug("Rejected pet type %r", answer)
        source.write("Error... make sure to input lowercase dog or cat")
        return False

    record.pet_type = answer
    source.write(f"You have chosen {record.pet_type}")
    return True


def prompt_pet_age(record: CheckInRecord, source: InputSource) -> int:
    """Ask for the pet's age in years. No bounds check.

    Raises:
        ValueError: The answer is not a whole number; the record is untouched.
    """
    age = source.read_int("How old is your pet? (years): ")
    record.pet_age = age
    source.write(f"Pet age is {record.pet_age}")
    return age


def prompt_pet_name(record: CheckInRecord, source: InputSource) -> str:
    name = source.read_line("What is your pet's name?")
    record.pet_name = name
    source.write(f"Welcome! {record.pet_name}")
    return name


def run_checkin(record: CheckInRecord, source: InputSource) -> CheckInRecord:
    """Prompt for type, name and age in turn; errors from the age prompt propagate."""
    prompt_pet_type(record, source)
    prompt_pet_name(record, source)
    prompt_pet_age(record, source)
    logger.debug("Check-in complete: %s", record)
    return record
