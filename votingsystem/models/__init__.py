from .candidate_model import Candidate
from .vote_model import Vote
from .result_model import (
    CandidateCreated,
    CandidateResult,
    ErrorKind,
    Failure,
    ResetResult,
    Results,
    VoteCast,
    WinnerEntry,
    WinnerResult,
)

__all__ = [
    "Candidate",
    "Vote",
    "CandidateCreated",
    "CandidateResult",
    "ErrorKind",
    "Failure",
    "ResetResult",
    "Results",
    "VoteCast",
    "WinnerEntry",
    "WinnerResult",
]
