import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mentors_api.auth import jwt_handler
from mentors_api.database import get_db
from mentors_api.models.user import User

# Header problems are reported by get_token_user_id so they share the JSON error shape.
security = HTTPBearer(auto_error=False)


def get_token_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> int:
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="No valid token provided")

    try:
        payload = jwt_handler.decode_access_token(credentials.credentials)
        return int(payload["sub"])
    except (jwt.InvalidTokenError, ValueError) as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token") from exc


def get_current_user(
    user_id: int = Depends(get_token_user_id),
    db: Session = Depends(get_db),
) -> User:
    try:
        user = db.query(User).filter(User.id == user_id, User.is_active.is_(True)).first()
    except SQLAlchemyError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch profile",
        ) from exc

    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
