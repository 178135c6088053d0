from decimal import Decimal, ROUND_HALF_UP
from pydantic import BaseModel, ConfigDict, Field
from ..config import PERCENTAGE_PLACES

_QUANTUM = Decimal(1).scaleb(-PERCENTAGE_PLACES)


class Candidate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str = ""
    vote_count: int = Field(default=0, ge=0, alias="voteCount")

    def add_vote(self) -> None:
        self.vote_count += 1

    def vote_percentage(self, total_votes: int) -> str:
        """
        Share of `total_votes` held by this candidate, as a fixed two
        decimal string. Rounds half away from zero on the exact value.
        """
        if total_votes == 0:
            return str(Decimal(0).quantize(_QUANTUM))
        share = Decimal(self.vote_count) * 100 / Decimal(total_votes)
        return str(share.quantize(_QUANTUM, rounding=ROUND_HALF_UP))
