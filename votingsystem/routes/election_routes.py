from fastapi import APIRouter, HTTPException, Request
from ..models import Candidate, CandidateCreated, Results, ResetResult, WinnerResult
from ..schemas import CandidateCreate
from .common import get_ledger, raise_for_failure

router = APIRouter(prefix="/election", tags=["Election"])


@router.post("/candidates", response_model=CandidateCreated)
def create_candidate(request: Request, candidate: CandidateCreate):
    ledger, lock = get_ledger(request)
    with lock:
        result = ledger.register_candidate(candidate.name, candidate.description)
    return raise_for_failure(result)


@router.get("/candidates")
def get_all_candidates(request: Request):
    ledger, lock = get_ledger(request)
    with lock:
        candidates = ledger.list_candidates()
    return {"candidates": candidates}


@router.get("/candidates/{candidate_id}", response_model=Candidate)
def get_candidate(request: Request, candidate_id: str):
    ledger, lock = get_ledger(request)
    with lock:
        candidate = ledger.get_candidate(candidate_id)
    if candidate is None:
        raise HTTPException(status_code=404, detail="Candidate not found.")
    return candidate


@router.get("/results", response_model=Results)
def get_results(request: Request):
    ledger, lock = get_ledger(request)
    with lock:
        return ledger.results()


@router.get("/winner", response_model=WinnerResult)
def get_winner(request: Request):
    ledger, lock = get_ledger(request)
    with lock:
        result = ledger.winner()
    return raise_for_failure(result)


@router.post("/reset", response_model=ResetResult)
def reset_election(request: Request):
    ledger, lock = get_ledger(request)
    with lock:
        return ledger.reset()
