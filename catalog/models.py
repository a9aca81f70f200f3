"""
Recipe models for the catalog.

Recipe is the full representation returned by the detail and like/unlike
endpoints. RecipeSummary is the projection returned by the list endpoint and
deliberately has no ingredients, instructions or servings.

NewRecipe validates records loaded into the store by catalog.seed; the API
never creates recipes.

# NOTE: Field names match the column names of the recipes table and the JSON
    keys the browser client reads (cooking_time, image_url, liked_at, ...).
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DIFFICULTIES = ("easy", "medium", "hard")


class RecipeSummary(BaseModel):
    """List view of a recipe."""

    id: int = Field(..., description="Recipe identifier")
    title: str = Field(..., description="Recipe title")
    description: str = Field("", description="Short description")
    cooking_time: int = Field(..., description="Cooking time in minutes")
    difficulty: str = Field(..., description="Difficulty: easy, medium or hard")
    image_url: Optional[str] = Field(None, description="URL to the recipe image")
    created_at: datetime = Field(..., description="When the recipe was added")
    liked_at: Optional[datetime] = Field(None, description="When the recipe was last liked, null if not liked")

    model_config = ConfigDict(from_attributes=True)


class Recipe(RecipeSummary):
    """Full recipe including ingredients and instructions."""

    ingredients: List[str] = Field(default_factory=list, description="Ingredients in display order")
    instructions: List[str] = Field(default_factory=list, description="Instruction steps in order")
    servings: int = Field(..., description="Number of servings")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Spicy Tofu Stir-Fry",
                "description": "Crispy tofu with vegetables in a chili garlic sauce.",
                "ingredients": ["400g firm tofu", "1 red pepper", "2 tbsp chili garlic sauce"],
                "instructions": ["Press and cube the tofu.", "Fry until golden.", "Toss with sauce."],
                "cooking_time": 25,
                "difficulty": "easy",
                "servings": 2,
                "image_url": "https://example.com/tofu.jpg",
                "created_at": "2024-01-15T10:30:00",
                "liked_at": None,
            }
        },
    )


class NewRecipe(BaseModel):
    """A recipe record to be loaded into the store."""

    title: str = Field(..., min_length=1)
    description: str = ""
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    cooking_time: int = Field(..., gt=0)
    difficulty: str
    servings: int = Field(..., gt=0)
    image_url: Optional[str] = None

    @field_validator("difficulty")
    @classmethod
    def _normalize_difficulty(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in DIFFICULTIES:
            raise ValueError(f"difficulty must be one of {', '.join(DIFFICULTIES)}")
        return normalized
