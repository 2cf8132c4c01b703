"""
Trip document shape stored in the ``trips`` collection.
"""
from datetime import datetime
from typing import Optional


def new_trip_document(
    owner_id: str,
    destination: str,
    budget: float,
    start_date: Optional[datetime] = None,
) -> dict:
    """Build a trip owned by ``owner_id`` with no expenses yet."""
    return {
        "user": str(owner_id),
        "destination": destination,
        "budget": budget,
        "startDate": start_date,
        "expenses": [],
    }
