import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from ballotbox import crud, lifecycle
from ballotbox.exceptions import BallotBoxError
from ballotbox.models.election_model import Election, ElectionCreate, ElectionCreated, ElectionList
from ballotbox.security import CurrentUser, get_current_user
from ballotbox.utils import utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/election", tags=["Election"])


def to_election(doc: Dict[str, Any], now=None) -> Election:
    """Attach the lifecycle status to a stored election."""
    now = now or utc_now()
    remaining = lifecycle.time_remaining(doc["start_date"], doc["end_date"], now)
    return Election(
        **doc,
        status=lifecycle.status_of(doc, now),
        seconds_remaining=remaining.total_seconds() if remaining is not None else None,
    )


@router.post("/create", response_model=ElectionCreated, status_code=201)
def create_election(election: ElectionCreate, user: CurrentUser = Depends(get_current_user)):
    try:
        election_id = crud.create_election(
            title=election.title,
            description=election.description,
            options=election.options,
            start_date=election.start_date,
            end_date=election.end_date,
            created_by=user.uid,
        )
    except BallotBoxError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"message": "Election created successfully!", "election_id": election_id}


@router.get("/active", response_model=ElectionList)
def active_elections():
    now = utc_now()
    try:
        elections = crud.get_active_elections(now)
    except BallotBoxError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"elections": [to_election(e, now) for e in elections]}


@router.get("/past", response_model=ElectionList)
def past_elections():
    now = utc_now()
    try:
        elections = crud.get_past_elections(now)
    except BallotBoxError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"elections": [to_election(e, now) for e in elections]}


@router.get("/mine", response_model=ElectionList)
def my_elections(user: CurrentUser = Depends(get_current_user)):
    try:
        elections = crud.get_user_elections(user.uid)
    except BallotBoxError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"elections": [to_election(e) for e in elections]}


@router.get("/{election_id}", response_model=Election)
def get_election(election_id: str):
    try:
        election = crud.get_election(election_id)
    except BallotBoxError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return to_election(election)
