from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Vote(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    voter_id: str = Field(..., alias="voterId")
    candidate_id: str = Field(..., alias="candidateId")
    timestamp: datetime = Field(default_factory=_utcnow)
