from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from mentors_api.auth.dependencies import get_current_user
from mentors_api.models.user import User

router = APIRouter(tags=['user'])


class UserResponse(BaseModel):
    """Public view of a user. The password hash is deliberately not a field."""
    id: int
    full_name: str
    email: str
    phone: str | None = None
    class_level: str | None = None
    is_active: bool
    trial_used: bool
    created_at: datetime | None = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class ProfileResponse(BaseModel):
    success: bool
    user: UserResponse


@router.get('/profile', response_model=ProfileResponse)
def get_profile(current_user: User = Depends(get_current_user)):
    return {'success': True, 'user': UserResponse.model_validate(current_user)}
