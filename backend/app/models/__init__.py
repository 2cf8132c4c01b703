"""Models package - document shapes for the document store."""
from app.models.user import new_user_document, public_summary
from app.models.trip import new_trip_document
from app.models.expense import ExpenseCategory, new_expense_document

__all__ = [
    "new_user_document",
    "public_summary",
    "new_trip_document",
    "ExpenseCategory",
    "new_expense_document",
]
