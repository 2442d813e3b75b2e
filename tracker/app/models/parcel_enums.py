"""
Parcel Status Enumeration.
"""

import enum
from typing import Optional


class ParcelStatus(str, enum.Enum):
    """
    Parcel status enumeration.
    
    Status flow:
        REGISTERED → SENT → DELIVERED
    
    Values are persisted verbatim, so they must never change.
    """
    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"
    
    def next(self) -> Optional["ParcelStatus"]:
        """Return the status that follows this one, or None for DELIVERED."""
        return _NEXT_STATUS.get(self)


_NEXT_STATUS = {
    ParcelStatus.REGISTERED: ParcelStatus.SENT,
    ParcelStatus.SENT: ParcelStatus.DELIVERED,
}


def can_transition(current: ParcelStatus, new: ParcelStatus) -> bool:
    """Only a single step forward along the status flow is legal."""
    return current.next() == new
