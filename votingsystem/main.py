# main.py
import logging
from threading import Lock
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .settings import APP_TITLE, CORS_ORIGINS, LOG_LEVEL
from .routes.election_routes import router as election_router
from .routes.vote_routes import vote_router
from .storage import ElectionLedger

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(ledger: Optional[ElectionLedger] = None) -> FastAPI:
    """
    Build the API around one ledger. A fresh ledger is created when none
    is passed in. All routes share `app.state.ledger_lock`.
    """
    app = FastAPI(title=APP_TITLE)

    app.state.ledger = ledger if ledger is not None else ElectionLedger()
    app.state.ledger_lock = Lock()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(election_router)
    app.include_router(vote_router)

    @app.get("/", tags=["Root"])
    def read_root():
        return {"message": f"Welcome to the {APP_TITLE}"}

    @app.get("/health", tags=["Root"])
    def health_check(request: Request):
        state = request.app.state
        with state.ledger_lock:
            candidates = len(state.ledger.list_candidates())
            votes = state.ledger.total_votes()
        return {"status": "healthy", "candidates": candidates, "totalVotes": votes}

    logger.info(f"{APP_TITLE} initialized")
    return app


app = create_app()
