"""
Trip store: per-owner trips and their embedded expenses.
"""
import logging
from datetime import datetime
from typing import List, Optional
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.database import Database
from app.core.exceptions import AuthorizationError, NotFoundError
from app.core.validators import require_text
from app.db.session import TRIPS
from app.models.expense import ExpenseCategory, new_expense_document
from app.models.trip import new_trip_document

logger = logging.getLogger(__name__)


def serialize_trip(trip: dict) -> dict:
    data = dict(trip)
    data["_id"] = str(trip["_id"])
    return data


def list_trips(db: Database, owner_id: str) -> List[dict]:
    """All trips owned by ``owner_id``, in insertion order."""
    return list(db[TRIPS].find({"user": str(owner_id)}))


def create_trip(
    db: Database,
    owner_id: str,
    destination: str,
    budget: float,
    start_date: Optional[datetime] = None,
) -> dict:
    trip = new_trip_document(owner_id, require_text(destination, "destination"), budget, start_date)
    result = db[TRIPS].insert_one(trip)
    trip["_id"] = result.inserted_id
    logger.info(f"Created trip {trip['_id']} for user {owner_id}")
    return trip


def get_owned_trip(db: Database, trip_id: str, owner_id: str) -> dict:
    """Fetch a trip and check the caller owns it."""
    try:
        oid = ObjectId(trip_id)
    except (InvalidId, TypeError):
        raise NotFoundError("Trip not found")

    trip = db[TRIPS].find_one({"_id": oid})
    if not trip:
        raise NotFoundError("Trip not found")
    if str(trip["user"]) != str(owner_id):
        raise AuthorizationError("Not authorized")
    return trip


def add_expense(
    db: Database,
    trip_id: str,
    owner_id: str,
    description: str,
    amount: float,
    category: ExpenseCategory = ExpenseCategory.OTHER,
    date: Optional[datetime] = None,
) -> dict:
    """Append an expense to an owned trip and return the updated trip."""
    trip = get_owned_trip(db, trip_id, owner_id)
    expense = new_expense_document(require_text(description, "description"), amount, category, date)

    updated = db[TRIPS].find_one_and_update(
        {"_id": trip["_id"], "user": trip["user"]},
        {"$push": {"expenses": expense}},
        return_document=ReturnDocument.AFTER,
    )
    if updated is None:
        raise NotFoundError("Trip not found")
    return updated
