"""
Parcel database model.

One row per tracked parcel. Columns map 1:1 to the Parcel record.
"""

from sqlalchemy import Column, Integer, String, Text, Enum
from tracker.app.db.session import Base
from tracker.app.models.parcel_enums import ParcelStatus


class Parcel(Base):
    """
    Parcel model for the tracker.
    
    `number` is assigned by the database on insert. `client` and
    `created_at` are written once and never updated.
    """
    __tablename__ = "parcel"
    
    number = Column(Integer, primary_key=True, autoincrement=True)
    
    # Ownership - opaque client identifier, not a foreign key
    client = Column(Integer, nullable=False, index=True)
    
    # Status (stored as the lowercase enum value)
    status = Column(
        Enum(
            ParcelStatus,
            native_enum=False,
            length=16,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        default=ParcelStatus.REGISTERED,
        nullable=False,
    )
    
    # Delivery information
    address = Column(Text, nullable=False)
    
    # RFC3339 UTC string, sortable as text
    created_at = Column(String(32), nullable=False)
    
    def __repr__(self):
        return f"<Parcel(number={self.number}, client={self.client}, status='{self.status.value}')>"
