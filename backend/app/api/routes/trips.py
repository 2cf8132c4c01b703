"""
Trip management routes.
"""
from fastapi import APIRouter, Depends
from pymongo.database import Database
from typing import List
from app.db.session import get_db
from app.schemas.trip import TripCreate, TripResponse
from app.schemas.expense import ExpenseCreate
from app.services import trip_service
from app.api.dependencies import Identity, get_current_identity

router = APIRouter(prefix="/trips", tags=["trips"])


@router.get("", response_model=List[TripResponse])
def list_trips(
    identity: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db)
):
    """List all trips for current user."""
    trips = trip_service.list_trips(db, identity.id)
    return [trip_service.serialize_trip(trip) for trip in trips]


@router.post("", response_model=TripResponse)
def create_trip(
    trip_data: TripCreate,
    identity: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db)
):
    """Create a new trip owned by the current user."""
    trip = trip_service.create_trip(
        db,
        owner_id=identity.id,
        destination=trip_data.destination,
        budget=trip_data.budget,
        start_date=trip_data.start_date,
    )
    return trip_service.serialize_trip(trip)


@router.post("/{trip_id}/expenses", response_model=TripResponse)
def add_expense(
    trip_id: str,
    expense_data: ExpenseCreate,
    identity: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db)
):
    """Append an expense to one of the current user's trips."""
    trip = trip_service.add_expense(
        db,
        trip_id=trip_id,
        owner_id=identity.id,
        description=expense_data.description,
        amount=expense_data.amount,
        category=expense_data.category,
        date=expense_data.date,
    )
    return trip_service.serialize_trip(trip)
