from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from .database import get_db
from .models import UserProfile
from .schemas import StoredKeyResponse, StoredKeyUpdate

router = APIRouter(prefix="/api/users", tags=["users"])


@router.put("/{user_id}/api-key", response_model=StoredKeyResponse)
def store_api_key(user_id: str, body: StoredKeyUpdate, db: Session = Depends(get_db)):
    """Create or replace the API key stored on a user's profile."""
    profile = db.get(UserProfile, user_id)
    if profile is None:
        profile = UserProfile(user_id=user_id)
        db.add(profile)
    profile.api_key = body.api_key
    db.commit()
    db.refresh(profile)
    return StoredKeyResponse(
        user_id=profile.user_id,
        has_key=bool(profile.api_key),
        updated_at=profile.updated_at,
    )


@router.delete("/{user_id}/api-key", status_code=204)
def delete_api_key(user_id: str, db: Session = Depends(get_db)):
    profile = db.get(UserProfile, user_id)
    if profile is None or not profile.api_key:
        raise HTTPException(status_code=404, detail="No stored API key found")
    profile.api_key = None
    db.commit()
    return Response(status_code=204)
