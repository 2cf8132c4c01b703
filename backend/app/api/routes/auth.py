"""
Authentication routes for registration, login and the current user.
"""
import logging
from fastapi import APIRouter, Depends
from pymongo.database import Database
from app.db.session import get_db
from app.schemas.user import UserCreate, UserLogin, AuthResponse, UserResponse
from app.models.user import public_summary
from app.core.exceptions import NotFoundError
from app.core.security import create_access_token
from app.services import user_service
from app.api.dependencies import Identity, get_current_identity

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=AuthResponse)
def register(user_data: UserCreate, db: Database = Depends(get_db)):
    """Register a new user and log them in straight away."""
    user = user_service.register_user(db, user_data.username, user_data.email, user_data.password)
    token = create_access_token(str(user["_id"]))
    return {"token": token, "user": public_summary(user)}


@router.post("/login", response_model=AuthResponse)
def login(credentials: UserLogin, db: Database = Depends(get_db)):
    """Login and get JWT token."""
    user = user_service.authenticate_user(db, credentials.email, credentials.password)
    logger.info(f"User {user['_id']} logged in")
    token = create_access_token(str(user["_id"]))
    return {"token": token, "user": public_summary(user)}


@router.get("/auth/user", response_model=UserResponse)
def get_current_user_info(
    identity: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db)
):
    """Get current user information."""
    user = user_service.get_user_by_id(db, identity.id)
    if not user:
        raise NotFoundError("User not found")
    return user_service.serialize_user(user)
