"""
Parcel database model.

One row per tracked parcel; the number is assigned by the database.
"""

from sqlalchemy import Column, Integer, String, CheckConstraint
from tracker.app.db.session import Base
from tracker.app.models.parcel_enums import ParcelStatus


_STATUS_VALUES = ", ".join(f"'{status.value}'" for status in ParcelStatus)


class ParcelRecord(Base):
    """
    Persisted parcel row.
    
    Status is kept as its plain string value; the check constraint
    restricts it to the ParcelStatus enumerants.
    """
    __tablename__ = "parcel"
    
    number = Column(Integer, primary_key=True, autoincrement=True)
    
    # Owning client (opaque external id, no foreign key)
    client = Column(Integer, nullable=False, index=True)
    
    status = Column(String(32), nullable=False)
    address = Column(String, nullable=False)
    
    # RFC3339 UTC string, written once on insert
    created_at = Column(String(64), nullable=False)
    
    __table_args__ = (
        CheckConstraint(f"status IN ({_STATUS_VALUES})", name="ck_parcel_status"),
        # SQLite otherwise reuses the highest deleted rowid
        {"sqlite_autoincrement": True},
    )
    
    def __repr__(self):
        return f"<ParcelRecord(number={self.number}, client={self.client}, status='{self.status}')>"
