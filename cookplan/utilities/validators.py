"""
Input validation schemas using Pydantic for API request bodies.
"""
from pydantic import BaseModel, Field, StrictFloat, StrictInt, field_validator
from typing import List, Union


class IngredientInput(BaseModel):
    """Schema for ingredient input validation."""
    name: str = Field(..., min_length=1, max_length=100)
    amount: float = Field(..., ge=0)
    unit: str = Field(default="", max_length=20)

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator('amount')
    @classmethod
    def keep_integral(cls, v):
        """200.0 -> 200 so rendered amounts stay clean."""
        return int(v) if float(v).is_integer() else v


class RecipeInput(BaseModel):
    """Schema for recipe input validation."""
    title: str = Field(..., min_length=1, max_length=200)
    ingredients: List[IngredientInput] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    dietary_flags: List[str] = Field(default_factory=list)

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError('Recipe title cannot be empty')
        return v.strip()

    @field_validator('steps', 'tags', 'dietary_flags')
    @classmethod
    def drop_blank(cls, v):
        """Filter out empty strings."""
        return [s.strip() for s in v if s and s.strip()]


class UserInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=254, pattern=r'^[^@\s]+@[^@\s]+$')


class LoginInput(BaseModel):
    email: str = Field(..., min_length=1)


class RatingInput(BaseModel):
    # Only JSON numbers; range and integrality are checked by Recipe.rate
    rating: Union[StrictInt, StrictFloat]


class MealPlanInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)


class PlanEntryInput(BaseModel):
    day: str = Field(..., min_length=1, max_length=50)
    recipe_id: str = Field(..., min_length=1)


class ShareInput(BaseModel):
    email: str = Field(..., min_length=1)
