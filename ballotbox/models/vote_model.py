from typing import Dict, List

from pydantic import BaseModel


class VoteIn(BaseModel):
    election_id: str
    option_index: int


class VoteCast(BaseModel):
    message: str
    election_id: str
    option: str


class VoteCheck(BaseModel):
    election_id: str
    has_voted: bool


class OptionResultOut(BaseModel):
    index: int
    option: str
    votes: int
    percentage: float


class ElectionResults(BaseModel):
    election_id: str
    title: str
    counts: Dict[int, int]
    total_votes: int
    results: List[OptionResultOut]
    is_final: bool
