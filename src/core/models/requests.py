"""Pydantic models for HTTP path parameters and request bodies."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, HttpUrl


class TripPath(BaseModel):
    tripId: UUID


class ParticipantPath(BaseModel):
    participantId: UUID


class CreateInviteBody(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    email: EmailStr


class CreateActivityBody(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=4)
    occurs_at: datetime


class CreateLinkBody(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=4)
    url: HttpUrl


class CreateTripBody(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    destination: str = Field(..., min_length=4)
    starts_at: datetime
    ends_at: datetime
    owner_name: str = Field(..., min_length=1)
    owner_email: EmailStr
    emails_to_invite: list[EmailStr] = []


class UpdateTripBody(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    destination: str = Field(..., min_length=4)
    starts_at: datetime
    ends_at: datetime
