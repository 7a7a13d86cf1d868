"""Pydantic schemas to validate task store payloads.

These schemas act as contracts at ingress points so we fail fast when
the store's payloads change shape. The store names the text field
``task``; locally it is ``description``.
"""
from typing import Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Task(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Document-backed stores send ``_id``
    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    description: str = Field(validation_alias=AliasChoices("description", "task"))
    completed: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def id_as_text(cls, v: Union[str, int]) -> str:
        if isinstance(v, bool) or not isinstance(v, (str, int)):
            raise ValueError("Task id must be a string or integer")
        v = str(v)
        if not v:
            raise ValueError("Task id cannot be empty")
        return v

    @field_validator("description")
    @classmethod
    def description_nonempty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Task description cannot be empty")
        return v


class ToggleResult(BaseModel):
    """Response of a toggle: at minimum the new completion flag."""

    model_config = ConfigDict(extra="ignore")

    completed: bool
