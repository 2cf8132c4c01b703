"""
Pydantic schemas for Trip entity.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime
from app.schemas.expense import ExpenseResponse


class TripCreate(BaseModel):
    """Schema for trip creation."""
    model_config = ConfigDict(populate_by_name=True)

    destination: str
    budget: float
    start_date: Optional[datetime] = Field(None, alias="startDate")


class TripResponse(BaseModel):
    """Schema for trip response."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    user: str
    destination: str
    budget: float
    start_date: Optional[datetime] = Field(None, alias="startDate")
    expenses: List[ExpenseResponse] = []
