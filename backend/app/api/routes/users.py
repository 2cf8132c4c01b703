"""
User profile routes.
"""
from typing import Optional
from fastapi import APIRouter, Depends, File, UploadFile
from pymongo.database import Database
from app.db.session import get_db
from app.schemas.user import AvatarResponse
from app.core.exceptions import NotFoundError
from app.services import upload_service, user_service
from app.api.dependencies import Identity, get_current_identity

router = APIRouter(prefix="/user", tags=["users"])


@router.post("/avatar", response_model=AvatarResponse)
def upload_avatar(
    avatar: Optional[UploadFile] = File(None),
    identity: Identity = Depends(get_current_identity),
    db: Database = Depends(get_db)
):
    """Upload a profile picture for the current user."""
    content = upload_service.read_avatar(avatar)

    if not user_service.get_user_by_id(db, identity.id):
        raise NotFoundError("User not found")

    path = upload_service.save_avatar(content, avatar.filename)
    if not user_service.set_profile_picture(db, identity.id, path):
        raise NotFoundError("User not found")
    return {"profilePicture": path}
