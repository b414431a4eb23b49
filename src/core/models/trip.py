from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator


class Activity(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    trip_id: UUID
    title: str
    occurs_at: datetime


class Link(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    trip_id: UUID
    title: str
    url: str


class Participant(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    trip_id: UUID
    email: EmailStr
    name: str | None = None
    is_confirmed: bool = False
    is_owner: bool = False


class Trip(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    destination: str = Field(..., min_length=1)
    starts_at: datetime
    ends_at: datetime
    is_confirmed: bool = False
    activities: list[Activity] = []

    @model_validator(mode="after")
    def ends_after_start(self) -> "Trip":
        if self.ends_at < self.starts_at:
            raise ValueError("ends_at must not be before starts_at")
        return self


class DayActivities(BaseModel):
    date: date
    activities: list[Activity]
