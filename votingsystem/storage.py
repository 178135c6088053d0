# votingsystem/storage.py
import itertools
import logging
import uuid
from typing import Dict, List, Optional, Set, Union

from .config import CANDIDATE_ID_PREFIX, CANDIDATE_ID_RANDOM_CHARS
from .models import (
    Candidate,
    CandidateCreated,
    CandidateResult,
    ErrorKind,
    Failure,
    ResetResult,
    Results,
    Vote,
    VoteCast,
    WinnerEntry,
    WinnerResult,
)

logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def _reject(operation: str, error: str, kind: ErrorKind) -> Failure:
    logger.warning(f"{operation} rejected [{kind.value}]: {error}")
    return Failure(error=error, kind=kind)


class ElectionLedger:
    """
    In-memory election state: registered candidates, the append-only list
    of cast votes and the set of voters who have already voted.

    Candidates handed to callers are copies; tallies change only through
    cast_vote.

    Not thread-safe. A host serving concurrent requests must serialize
    every call on one ledger behind a single lock.
    """

    def __init__(self):
        self._candidates: List[Candidate] = []
        self._candidates_by_id: Dict[str, Candidate] = {}
        self._votes: List[Vote] = []
        self._voters: Set[str] = set()
        self._sequence = itertools.count(1)

    def _new_candidate_id(self) -> str:
        suffix = uuid.uuid4().hex[:CANDIDATE_ID_RANDOM_CHARS]
        return f"{CANDIDATE_ID_PREFIX}_{next(self._sequence)}_{suffix}"

    def register_candidate(
        self, name: str, description: str = ""
    ) -> Union[CandidateCreated, Failure]:
        """
        Add a new candidate to the election

        Args:
            name: Display name, must not be blank
            description: Optional free text

        Returns:
            CandidateCreated carrying the new candidate, or a ValidationError failure
        """
        if _is_blank(name):
            return _reject("Candidate registration", "Candidate name is required", ErrorKind.VALIDATION)

        name = name.strip()
        candidate = Candidate(
            id=self._new_candidate_id(),
            name=name,
            description=description or "",
        )
        self._candidates.append(candidate)
        self._candidates_by_id[candidate.id] = candidate
        logger.info(f"Candidate {candidate.id} ({name}) registered")

        return CandidateCreated(
            message=f"Candidate {name} added successfully",
            candidate=candidate.model_copy(),
        )

    def list_candidates(self) -> List[Candidate]:
        return [c.model_copy() for c in self._candidates]

    def get_candidate(self, candidate_id: str) -> Optional[Candidate]:
        candidate = self._candidates_by_id.get(candidate_id)
        return candidate.model_copy() if candidate is not None else None

    def cast_vote(self, voter_id: str, candidate_id: str) -> Union[VoteCast, Failure]:
        """
        Cast a vote for a candidate

        Checks run in a fixed order and the first failing one decides the
        error: blank voter id, voter already voted, unknown candidate. A
        repeat voter is rejected even when the candidate id is invalid.

        Args:
            voter_id: Caller supplied voter identifier
            candidate_id: Id of a registered candidate

        Returns:
            VoteCast carrying the recorded vote, or a failure
        """
        if _is_blank(voter_id):
            return _reject("Vote", "Voter ID is required", ErrorKind.VALIDATION)

        if voter_id in self._voters:
            return _reject(f"Vote from {voter_id}", "You have already voted", ErrorKind.DUPLICATE_VOTE)

        candidate = self._candidates_by_id.get(candidate_id)
        if candidate is None:
            return _reject(f"Vote from {voter_id}", "Invalid candidate ID", ErrorKind.NOT_FOUND)

        # Nothing below can fail, so the three updates land together
        vote = Vote(voter_id=voter_id, candidate_id=candidate.id)
        self._votes.append(vote)
        candidate.add_vote()
        self._voters.add(voter_id)
        logger.info(f"Vote recorded for candidate {candidate.id}")

        return VoteCast(
            message=f"Vote cast successfully for {candidate.name}",
            vote=vote,
        )

    def results(self) -> Results:
        total_votes = len(self._votes)
        rows = [
            CandidateResult(
                id=c.id,
                name=c.name,
                vote_count=c.vote_count,
                percentage=c.vote_percentage(total_votes),
            )
            for c in self._candidates
        ]
        # sorted() is stable: tied candidates keep registration order
        rows = sorted(rows, key=lambda r: r.vote_count, reverse=True)

        return Results(
            total_votes=total_votes,
            total_candidates=len(self._candidates),
            results=rows,
        )

    def winner(self) -> Union[WinnerResult, Failure]:
        """
        Get winner(s) of the election. Every candidate holding the top
        count is returned, so a tie yields several winners.
        """
        if not self._candidates:
            return _reject("Winner", "No candidates in the election", ErrorKind.EMPTY_ELECTION)

        total_votes = len(self._votes)
        if total_votes == 0:
            return _reject("Winner", "No votes cast yet", ErrorKind.NO_VOTES)

        max_votes = max(c.vote_count for c in self._candidates)
        winners = [
            WinnerEntry(id=c.id, name=c.name, votes=c.vote_count)
            for c in self._candidates
            if c.vote_count == max_votes
        ]
        return WinnerResult(winners=winners, total_votes=total_votes)

    def total_votes(self) -> int:
        return len(self._votes)

    def has_voted(self, voter_id: str) -> bool:
        return voter_id in self._voters

    def reset(self) -> ResetResult:
        self._candidates = []
        self._candidates_by_id = {}
        self._votes = []
        self._voters = set()
        logger.info("Ledger reset")
        return ResetResult(message="Voting system has been reset")
