"""
Parcel Status Enumeration.
"""

import enum


class ParcelStatus(str, enum.Enum):
    """
    Parcel status enumeration.
    
    Values are stored in their canonical lowercase form.
    
    Status flow:
        REGISTERED → SENT → DELIVERED
    """
    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"
