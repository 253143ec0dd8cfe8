"""
Static animal records.

PETS holds the general entries; NEARBY_DUCK is a separate named entry and
is not part of PETS.
"""

from typing import Tuple

from app.logging_config import get_logger
from domain.schemas.animal_schemas import AnimalRecord

logger = get_logger("domain.pets")


PETS: Tuple[AnimalRecord, ...] = (
    AnimalRecord(kind="Dog", is_hungry=True, meal_needed="Kibble"),
    AnimalRecord(kind="Python", is_hungry=False, meal_needed="Cat"),
    AnimalRecord(kind="Cat", is_hungry=True, meal_needed="Kibble"),
    AnimalRecord(kind="Lion", is_hungry=False, meal_needed="Kibble"),
)

NEARBY_DUCK = AnimalRecord(kind="Duck", is_hungry=True, meal_needed="pondweed")

logger.debug("Loaded %d pets plus nearby %s", len(PETS), NEARBY_DUCK.kind)
