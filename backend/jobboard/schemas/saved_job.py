from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class SaveJobIn(BaseModel):
    # Opaque listing from the job source; must carry at least an "id".
    job: Optional[Dict[str, Any]] = None


class SavedJobOut(BaseModel):
    id: int
    email: str
    job: Dict[str, Any]
    created_at: datetime = Field(serialization_alias="createdAt")

    model_config = ConfigDict(from_attributes=True)


def dump_saved_job(saved) -> dict:
    return SavedJobOut.model_validate(saved).model_dump(mode="json", by_alias=True)
