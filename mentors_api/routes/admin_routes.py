import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mentors_api.database import get_db
from mentors_api.models.user import User
from mentors_api.routes.user_routes import UserResponse

# No authentication dependency: whether this listing is meant to be reachable
# only from an internal network is still an open product question.
router = APIRouter(tags=['admin'])

logger = logging.getLogger(__name__)


class UserListResponse(BaseModel):
    success: bool
    users: list[UserResponse]
    total: int


@router.get('/users', response_model=UserListResponse)
def list_users(db: Session = Depends(get_db)):
    try:
        users = db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()
    except SQLAlchemyError as exc:
        logger.exception('Failed to fetch users')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to fetch users',
        ) from exc

    return {
        'success': True,
        'users': [UserResponse.model_validate(user) for user in users],
        'total': len(users),
    }
