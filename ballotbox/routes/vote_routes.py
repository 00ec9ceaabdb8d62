from fastapi import APIRouter, Depends, HTTPException

from ballotbox import crud
from ballotbox.exceptions import BallotBoxError
from ballotbox.models.vote_model import ElectionResults, VoteCast, VoteCheck, VoteIn
from ballotbox.security import CurrentUser, get_current_user

vote_router = APIRouter(prefix="/vote", tags=["Vote"])


# ------------------------------
# CAST VOTE
# ------------------------------
@vote_router.post("/cast", response_model=VoteCast, status_code=201)
def cast_vote(vote: VoteIn, user: CurrentUser = Depends(get_current_user)):
    """
    Casts the caller's vote. Each user gets one vote per election.
    """
    try:
        recorded = crud.cast_vote(vote.election_id, vote.option_index, user.uid)
    except BallotBoxError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return {
        "message": "Your vote has been recorded",
        "election_id": recorded["election_id"],
        "option": recorded["option"],
    }


# ------------------------------
# CHECK IF USER HAS ALREADY VOTED
# ------------------------------
@vote_router.get("/check/{election_id}", response_model=VoteCheck)
def check_vote(election_id: str, user: CurrentUser = Depends(get_current_user)):
    try:
        voted = crud.has_user_voted(election_id, user.uid)
    except BallotBoxError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"election_id": election_id, "has_voted": voted}


# ------------------------------
# RESULTS
# ------------------------------
@vote_router.get("/results/{election_id}", response_model=ElectionResults)
def get_results(election_id: str):
    """
    Tally for an election. Before the end date the numbers are preliminary
    and ``is_final`` is false.
    """
    try:
        outcome = crud.get_election_summary(election_id)
    except BallotBoxError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    summary = outcome["summary"]
    return {
        "election_id": election_id,
        "title": outcome["election"]["title"],
        "counts": outcome["counts"],
        "total_votes": summary.total,
        "results": [
            {"index": r.index, "option": r.option, "votes": r.votes, "percentage": round(r.percentage, 1)}
            for r in summary.rows
        ],
        "is_final": outcome["is_final"],
    }
