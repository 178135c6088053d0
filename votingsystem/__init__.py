"""In-memory online voting ledger with an optional FastAPI host."""

from .storage import ElectionLedger
from .models import Candidate, ErrorKind, Failure, Vote

__all__ = ["ElectionLedger", "Candidate", "ErrorKind", "Failure", "Vote"]
