from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class ElectionCreate(BaseModel):
    title: str = Field(..., example="Team lunch")
    description: str = Field(..., example="Where should we go on Friday?")
    options: List[str] = Field(..., example=["Pizza", "Sushi", "Tacos"])
    start_date: datetime
    end_date: datetime


class Election(BaseModel):
    id: str
    title: str
    description: str
    options: List[str]
    created_by: str
    start_date: datetime
    end_date: datetime
    created_at: Optional[datetime] = None
    is_active: bool = True
    status: str
    # Seconds until the election starts (upcoming) or ends (active); None once ended
    seconds_remaining: Optional[float] = None


class ElectionCreated(BaseModel):
    message: str
    election_id: str


class ElectionList(BaseModel):
    elections: List[Election]
