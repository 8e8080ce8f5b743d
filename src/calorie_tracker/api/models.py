"""Pydantic models for entry request payloads."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EntryCreate(BaseModel):
    """Payload for logging a day."""

    model_config = ConfigDict(populate_by_name=True)

    day: date = Field(alias="date")
    calories: int = Field(ge=0, le=20000)
    weight: float | None = Field(default=None, ge=20, le=1000)
    protein: int | None = Field(default=None, ge=0, le=1000)
    carbs: int | None = Field(default=None, ge=0, le=2000)
    fat: int | None = Field(default=None, ge=0, le=1000)


class EntryUpdate(BaseModel):
    """Partial update for a logged day."""

    model_config = ConfigDict(populate_by_name=True)

    day: date | None = Field(default=None, alias="date")
    calories: int | None = Field(default=None, ge=0, le=20000)
    weight: float | None = Field(default=None, ge=20, le=1000)
    protein: int | None = Field(default=None, ge=0, le=1000)
    carbs: int | None = Field(default=None, ge=0, le=2000)
    fat: int | None = Field(default=None, ge=0, le=1000)

    @field_validator("day", "calories")
    @classmethod
    def reject_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("field may be omitted but not null")
        return value
