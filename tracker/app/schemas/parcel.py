"""
Parcel Pydantic schema.

The in-memory parcel value handed to and returned by the parcel store.
"""

import re
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from tracker.app.models.parcel_enums import ParcelStatus


RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# RFC3339 date-time restricted to UTC: "Z" or a zero offset
_RFC3339_UTC = re.compile(
    r"(\d{4}-\d{2}-\d{2})[Tt](\d{2}:\d{2}:\d{2})(\.\d+)?([Zz]|\+00:00)"
)


def utc_now_rfc3339() -> str:
    """Current UTC time as an RFC3339 string with second precision."""
    return datetime.now(timezone.utc).strftime(RFC3339_FORMAT)


class Parcel(BaseModel):
    """
    A trackable shipment record.
    
    ``number`` stays None until the store assigns it on insert.
    Assignments are validated like construction.
    """
    model_config = ConfigDict(from_attributes=True, validate_assignment=True)
    
    number: Optional[int] = Field(None, description="Store-assigned parcel number")
    client: int = Field(..., description="Owning client identifier")
    status: ParcelStatus = Field(ParcelStatus.REGISTERED, description="Delivery status")
    address: str = Field(..., description="Delivery address")
    created_at: str = Field(default_factory=utc_now_rfc3339, description="RFC3339 UTC creation timestamp")
    
    @field_validator("created_at")
    @classmethod
    def check_rfc3339_utc(cls, value: str) -> str:
        match = _RFC3339_UTC.fullmatch(value)
        if match is None:
            raise ValueError(f"created_at is not an RFC3339 UTC timestamp: {value!r}")
        try:
            datetime.strptime(f"{match.group(1)}T{match.group(2)}", "%Y-%m-%dT%H:%M:%S")
        except ValueError:
            raise ValueError(f"created_at is not a valid date and time: {value!r}")
        return value
