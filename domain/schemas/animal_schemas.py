from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class AnimalRecord(BaseModel):
    """An animal, whether it is hungry, and the meal it needs"""

    kind: StrictStr = Field(..., description="Kind of animal (e.g., 'Dog', 'Duck')")
    is_hungry: StrictBool = Field(..., description="Whether the animal is hungry")
    meal_needed: StrictStr = Field(
        ..., description="Meal the animal needs (e.g., 'Kibble', 'pondweed')"
    )

    model_config = ConfigDict(frozen=True)
