import functools
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from pymongo.errors import DuplicateKeyError, PyMongoError

from ballotbox import config, lifecycle
from ballotbox.database.connection import election_collection, user_collection, vote_collection
from ballotbox.exceptions import (
    DuplicateVoteError,
    ElectionClosedError,
    NotFoundError,
    PermissionDeniedError,
    StoreError,
    ValidationError,
)
from ballotbox.results import summarize, tally
from ballotbox.utils import parse_object_id, serialize_document, to_storage, truncate_ms, utc_now

logger = logging.getLogger(__name__)


def store_call(func):
    """Surface any pymongo failure as StoreError, without retrying."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PyMongoError as e:
            logger.error(f"Record store error in {func.__name__}: {e}")
            raise StoreError(str(e)) from e

    return wrapper


# ------------------------------
# Elections
# ------------------------------

def validate_election_input(
    title: Optional[str],
    description: Optional[str],
    options: Optional[List[str]],
    start_date: Optional[datetime],
    end_date: Optional[datetime],
    now: datetime,
) -> Dict[str, Any]:
    """Check creation input and return the cleaned fields.

    Blank options are dropped and the rest keep their order. Dates are
    compared at the precision they are stored with.
    """
    title = (title or "").strip()
    description = (description or "").strip()
    if not title or not description or start_date is None or end_date is None:
        raise ValidationError("Please fill in all required fields")

    valid_options = [o.strip() for o in (options or []) if o and o.strip()]
    if len(valid_options) < config.MIN_OPTIONS:
        raise ValidationError(f"At least {config.MIN_OPTIONS} valid options are required")

    start = truncate_ms(start_date)
    end = truncate_ms(end_date)
    if start <= truncate_ms(now):
        raise ValidationError("Start date must be in the future")
    if end <= start:
        raise ValidationError("End date must be after start date")

    return {
        "title": title,
        "description": description,
        "options": valid_options,
        "start_date": start,
        "end_date": end,
    }


@store_call
def create_election(
    title: str,
    description: str,
    options: List[str],
    start_date: datetime,
    end_date: datetime,
    created_by: str,
    now: Optional[datetime] = None,
) -> str:
    now = now or utc_now()
    fields = validate_election_input(title, description, options, start_date, end_date, now)
    doc = {
        "title": fields["title"],
        "description": fields["description"],
        "options": fields["options"],
        "created_by": created_by,
        "start_date": to_storage(fields["start_date"]),
        "end_date": to_storage(fields["end_date"]),
        "created_at": to_storage(now),
        "is_active": True,
    }
    result = election_collection().insert_one(doc)
    election_id = str(result.inserted_id)
    logger.info(f"Election {election_id} created by {created_by} with {len(doc['options'])} options")
    return election_id


@store_call
def get_election(election_id: str) -> Dict[str, Any]:
    obj_id = parse_object_id(election_id)
    if obj_id is None:
        raise NotFoundError("Election not found")
    doc = election_collection().find_one({"_id": obj_id})
    if not doc:
        raise NotFoundError("Election not found")
    return serialize_document(doc)


@store_call
def get_active_elections(now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    now = to_storage(now or utc_now())
    cursor = election_collection().find(
        {"start_date": {"$lte": now}, "end_date": {"$gte": now}, "is_active": True}
    )
    return [serialize_document(doc) for doc in cursor]


@store_call
def get_past_elections(now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    now = to_storage(now or utc_now())
    cursor = election_collection().find({"end_date": {"$lt": now}})
    return [serialize_document(doc) for doc in cursor]


@store_call
def get_user_elections(user_id: str) -> List[Dict[str, Any]]:
    cursor = election_collection().find({"created_by": user_id})
    return [serialize_document(doc) for doc in cursor]


# ------------------------------
# Votes
# ------------------------------

@store_call
def has_user_voted(election_id: str, user_id: str) -> bool:
    return vote_collection().find_one({"election_id": election_id, "user_id": user_id}) is not None


@store_call
def cast_vote(election_id: str, option_index: int, user_id: str, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Record one vote for ``user_id``.

    The vote is keyed on ``election_id:user_id`` and backed by the unique
    (election_id, user_id) index, so the insert is an insert-if-absent and a
    second vote is rejected even when two requests pass the
    ``has_user_voted`` check at the same time.
    """
    now = now or utc_now()
    election = get_election(election_id)

    if not 0 <= option_index < len(election["options"]):
        raise ValidationError("Option not found in election")
    if not lifecycle.is_active(election["start_date"], election["end_date"], election.get("is_active", True), now):
        raise ElectionClosedError("Election is not open for voting")
    if election["created_by"] == user_id and not config.ALLOW_CREATOR_VOTE:
        raise PermissionDeniedError("You cannot vote in your own election")

    if has_user_voted(election_id, user_id):
        logger.warning(f"Rejected repeat vote by {user_id} in election {election_id}")
        raise DuplicateVoteError("You have already voted in this election")

    vote = {
        "_id": f"{election_id}:{user_id}",
        "election_id": election_id,
        "option_index": option_index,
        "user_id": user_id,
        "timestamp": to_storage(now),
    }
    try:
        vote_collection().insert_one(vote)
    except DuplicateKeyError:
        logger.warning(f"Concurrent repeat vote by {user_id} in election {election_id} blocked by index")
        raise DuplicateVoteError("You have already voted in this election")

    logger.info(f"Vote recorded in election {election_id} for option {option_index}")
    return {"election_id": election_id, "option_index": option_index, "option": election["options"][option_index]}


# ------------------------------
# Results
# ------------------------------

@store_call
def get_election_results(election_id: str) -> Dict[int, int]:
    """Vote count per option index; options with no votes are absent."""
    cursor = vote_collection().find({"election_id": election_id}, {"option_index": 1})
    return tally(doc["option_index"] for doc in cursor)


def get_election_summary(election_id: str, now: Optional[datetime] = None) -> Dict[str, Any]:
    now = now or utc_now()
    election = get_election(election_id)
    counts = get_election_results(election_id)
    summary = summarize(election["options"], counts)
    return {
        "election": election,
        "counts": counts,
        "summary": summary,
        "is_final": lifecycle.has_ended(election["end_date"], now),
    }


# ------------------------------
# Users (identity provider)
# ------------------------------

@store_call
def create_user(email: str, hashed_password: str, now: Optional[datetime] = None) -> Optional[str]:
    """Insert a user; returns the new uid, or None if the email is taken."""
    doc = {
        "email": email.lower(),
        "hashed_password": hashed_password,
        "created_at": to_storage(now or utc_now()),
    }
    try:
        result = user_collection().insert_one(doc)
    except DuplicateKeyError:
        logger.warning(f"User with email {email} already exists.")
        return None
    return str(result.inserted_id)


@store_call
def get_user_by_email(email: str) -> Optional[Dict[str, Any]]:
    doc = user_collection().find_one({"email": email.lower()})
    return serialize_document(doc) if doc else None
