from pydantic import BaseModel, ConfigDict, Field


class CandidateCreate(BaseModel):
    name: str
    description: str = ""


class VoteCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    voter_id: str = Field(..., alias="voterId")
    candidate_id: str = Field(..., alias="candidateId")
