"""
Tests for the Parcel value and its status enumeration.
"""

import pytest
from datetime import datetime
from pydantic import ValidationError

from tracker.app.models.parcel import ParcelRecord
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import Parcel, utc_now_rfc3339, RFC3339_FORMAT


def test_status_values_are_canonical_strings():
    assert [s.value for s in ParcelStatus] == ["registered", "sent", "delivered"]
    assert ParcelStatus("sent") is ParcelStatus.SENT


def test_defaults():
    parcel = Parcel(client=1, address="test")
    
    assert parcel.number is None
    assert parcel.status == ParcelStatus.REGISTERED
    datetime.strptime(parcel.created_at, RFC3339_FORMAT)


def test_utc_now_rfc3339_format():
    value = utc_now_rfc3339()
    
    assert value.endswith("Z")
    datetime.strptime(value, RFC3339_FORMAT)


def test_unknown_status_rejected():
    with pytest.raises(ValidationError):
        Parcel(client=1, address="test", status="lost")


@pytest.mark.parametrize("created_at", [
    "yesterday",
    "",
    "2024-01-01T00:00:00",
    "2024-01-01T03:00:00+03:00",
    "2024-01-01T00:00:00-00:00",
    "2024-01-01 00:00:00Z",
    "2024-01-01T00:00Z",
    "2024-02-30T00:00:00Z",
    "2024-01-01T00:00:00Z\n",
])
def test_invalid_created_at_rejected(created_at):
    with pytest.raises(ValidationError):
        Parcel(client=1, address="test", created_at=created_at)


@pytest.mark.parametrize("created_at", [
    "2024-01-01T00:00:00Z",
    "2024-01-01T00:00:00.5Z",
    "2024-01-01T00:00:00+00:00",
    "2024-01-01t00:00:00z",
])
def test_utc_timestamp_kept_verbatim(created_at):
    parcel = Parcel(client=1, address="test", created_at=created_at)
    
    assert parcel.created_at == created_at


def test_assignment_is_validated():
    parcel = Parcel(client=1, address="test")
    
    with pytest.raises(ValidationError):
        parcel.status = "lost"
    with pytest.raises(ValidationError):
        parcel.created_at = "yesterday"
    
    parcel.status = "sent"
    assert parcel.status is ParcelStatus.SENT


def test_built_from_record():
    record = ParcelRecord(
        number=5,
        client=1000,
        status="delivered",
        address="test",
        created_at="2024-01-01T00:00:00Z",
    )
    
    parcel = Parcel.model_validate(record)
    
    assert parcel == Parcel(
        number=5,
        client=1000,
        status=ParcelStatus.DELIVERED,
        address="test",
        created_at="2024-01-01T00:00:00Z",
    )
