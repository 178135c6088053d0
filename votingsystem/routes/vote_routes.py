from fastapi import APIRouter, Request
from ..models import VoteCast
from ..schemas import VoteCreate
from .common import get_ledger, raise_for_failure

vote_router = APIRouter(prefix="/vote", tags=["Vote"])


@vote_router.post("/cast", response_model=VoteCast)
def cast_vote(request: Request, vote: VoteCreate):
    """
    Casts a vote. One accepted vote per voter id; repeats get 409.
    """
    ledger, lock = get_ledger(request)
    with lock:
        result = ledger.cast_vote(vote.voter_id, vote.candidate_id)
    return raise_for_failure(result)


@vote_router.get("/check/{voter_id}")
def check_vote(request: Request, voter_id: str):
    ledger, lock = get_ledger(request)
    with lock:
        voted = ledger.has_voted(voter_id)
    return {
        "voterId": voter_id,
        "hasVoted": voted,
        "status": "already_voted" if voted else "not_voted",
    }


@vote_router.get("/total")
def total_votes(request: Request):
    ledger, lock = get_ledger(request)
    with lock:
        return {"totalVotes": ledger.total_votes()}
