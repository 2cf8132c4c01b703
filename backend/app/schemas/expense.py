"""
Pydantic schemas for Expense entity.
"""
from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime
from app.models.expense import ExpenseCategory


class ExpenseCreate(BaseModel):
    """Schema for expense creation."""
    description: str
    amount: float
    category: ExpenseCategory = ExpenseCategory.OTHER
    date: Optional[datetime] = None


class ExpenseResponse(BaseModel):
    """Schema for expense response."""
    model_config = ConfigDict(use_enum_values=True)

    description: str
    amount: float
    category: ExpenseCategory
    date: datetime
