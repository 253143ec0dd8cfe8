"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.animal_schemas import AnimalRecord

__all__ = ["AnimalRecord"]
