"""
Pydantic schema for a mountain record.

The wire format uses ``isNorthern`` (camelCase); the Python attribute is
``is_northern``.  Both names are accepted on input, and responses are always
serialised with the alias.
"""

from pydantic import BaseModel, ConfigDict, Field


class Mountain(BaseModel):
    """A single mountain entry.  Equality compares every field."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., examples=[1], description="Caller-supplied identifier.")
    name: str = Field(..., examples=["Everest"])
    country: str = Field(..., examples=["Nepal"])
    range: str = Field(..., examples=["Himalaya"])
    altitude: int = Field(..., examples=[8848], description="Height in metres.")
    is_northern: bool = Field(
        ...,
        alias="isNorthern",
        examples=[True],
        description="True when the mountain is in the northern hemisphere.",
    )

    def to_json(self) -> dict:
        """Return the JSON-ready dict using wire field names."""
        return self.model_dump(by_alias=True)
