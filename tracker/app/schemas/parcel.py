"""
Parcel Pydantic schemas.

`Parcel` is the in-memory record handed to and returned by the store.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

from tracker.app.models.parcel_enums import ParcelStatus

CREATED_AT_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a moment (default: now) as an RFC3339 UTC string with second precision."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).strftime(CREATED_AT_FORMAT)


class Parcel(BaseModel):
    """Schema for a tracked parcel."""
    number: Optional[int] = Field(None, description="Assigned by the store on add")
    client: int = Field(..., description="Owning client identifier")
    status: ParcelStatus = Field(default=ParcelStatus.REGISTERED)
    address: str = Field(..., description="Delivery address")
    created_at: str = Field(default_factory=utc_timestamp, description="RFC3339 UTC creation time")

    class Config:
        from_attributes = True
