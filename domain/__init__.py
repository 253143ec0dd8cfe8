"""
Domain layer - Animal records and their schemas.
"""

from domain import schemas
from domain.pets import PETS, NEARBY_DUCK

__all__ = ["schemas", "PETS", "NEARBY_DUCK"]
