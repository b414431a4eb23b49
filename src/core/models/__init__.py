"""
Pydantic models for the plann.er API.
"""

from core.models.requests import (
    CreateActivityBody,
    CreateInviteBody,
    CreateLinkBody,
    CreateTripBody,
    ParticipantPath,
    TripPath,
    UpdateTripBody,
)
from core.models.trip import Activity, DayActivities, Link, Participant, Trip

__all__ = [
    "Activity",
    "CreateActivityBody",
    "CreateInviteBody",
    "CreateLinkBody",
    "CreateTripBody",
    "DayActivities",
    "Link",
    "Participant",
    "ParticipantPath",
    "Trip",
    "TripPath",
    "UpdateTripBody",
]
