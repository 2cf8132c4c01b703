"""
Expense sub-document kept inside its owning trip.
"""
from datetime import datetime, timezone
from typing import Optional
import enum


class ExpenseCategory(str, enum.Enum):
    """Expense category enumeration."""
    LODGING = "Lodging"
    TRANSPORTATION = "Transportation"
    FOOD = "Food"
    ENTERTAINMENT = "Entertainment"
    INSURANCE = "Insurance"
    OTHER = "Other"


def new_expense_document(
    description: str,
    amount: float,
    category: ExpenseCategory = ExpenseCategory.OTHER,
    date: Optional[datetime] = None,
) -> dict:
    return {
        "description": description,
        "amount": amount,
        "category": ExpenseCategory(category).value,
        "date": date or datetime.now(timezone.utc),
    }
