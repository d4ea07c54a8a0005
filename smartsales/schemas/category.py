"""Category Schemas — create/update bodies for /categories.

Invariants:
    - name is optional at the schema level so a missing name yields the
      `{"name": "name is required."}` field map instead of a generic 400
    - parent is a non-negative term id; 0 means root
"""

from pydantic import BaseModel, ConfigDict, Field


class CategoryWrite(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(None, max_length=200)
    description: str | None = None
    slug: str | None = Field(None, max_length=200)
    parent: int | None = Field(None, ge=0)
