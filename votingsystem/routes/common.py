from threading import Lock
from typing import Tuple

from fastapi import HTTPException, Request

from ..models import ErrorKind, Failure
from ..storage import ElectionLedger

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.DUPLICATE_VOTE: 409,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.EMPTY_ELECTION: 404,
    ErrorKind.NO_VOTES: 404,
}


def get_ledger(request: Request) -> Tuple[ElectionLedger, Lock]:
    """The app's ledger and the lock every ledger call must hold."""
    state = request.app.state
    return state.ledger, state.ledger_lock


def raise_for_failure(result):
    if isinstance(result, Failure):
        raise HTTPException(status_code=STATUS_BY_KIND[result.kind], detail=result.error)
    return result
