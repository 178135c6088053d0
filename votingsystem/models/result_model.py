from enum import Enum
from typing import List, Literal
from pydantic import BaseModel, ConfigDict, Field
from .candidate_model import Candidate
from .vote_model import Vote


class ErrorKind(str, Enum):
    VALIDATION = "ValidationError"
    DUPLICATE_VOTE = "DuplicateVoteError"
    NOT_FOUND = "NotFoundError"
    EMPTY_ELECTION = "EmptyElectionError"
    NO_VOTES = "NoVotesError"


class Failure(BaseModel):
    success: Literal[False] = False
    error: str
    kind: ErrorKind


# --- Success variants ---
class CandidateCreated(BaseModel):
    success: Literal[True] = True
    message: str
    candidate: Candidate


class VoteCast(BaseModel):
    success: Literal[True] = True
    message: str
    vote: Vote


class ResetResult(BaseModel):
    success: Literal[True] = True
    message: str


# --- Tallies ---
class CandidateResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    vote_count: int = Field(..., alias="voteCount")
    percentage: str


class Results(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_votes: int = Field(..., alias="totalVotes")
    total_candidates: int = Field(..., alias="totalCandidates")
    results: List[CandidateResult]


class WinnerEntry(BaseModel):
    id: str
    name: str
    votes: int


class WinnerResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: Literal[True] = True
    winners: List[WinnerEntry]
    total_votes: int = Field(..., alias="totalVotes")
