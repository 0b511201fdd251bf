from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserSummaryOut(BaseModel):
    """Login payload: identity fields only."""

    id: int
    username: str
    email: str
    experience_level: str = Field(serialization_alias="experienceLevel")

    model_config = ConfigDict(from_attributes=True)


class UserOut(UserSummaryOut):
    created_at: datetime = Field(serialization_alias="createdAt")


def dump_user(user, *, summary: bool = False) -> dict:
    schema = UserSummaryOut if summary else UserOut
    return schema.model_validate(user).model_dump(mode="json", by_alias=True)
