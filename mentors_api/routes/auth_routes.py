import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mentors_api.auth import jwt_handler, passwords
from mentors_api.database import get_db
from mentors_api.models.user import User
from mentors_api.routes.user_routes import UserResponse

router = APIRouter(tags=['auth'])

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = 'Invalid credentials'

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def _validate_password_length(value: str) -> str:
    if len(value.encode('utf-8')) > passwords.MAX_PASSWORD_BYTES:
        raise ValueError(f'Password must be {passwords.MAX_PASSWORD_BYTES} bytes or fewer.')
    return value


class RegisterRequest(BaseModel):
    # Clients send phone numbers and class levels as JSON numbers too.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True)

    full_name: RequiredText
    # Stored exactly as given; lookups are case-sensitive.
    email: RequiredText
    phone: RequiredText
    class_level: RequiredText
    password: str = Field(min_length=1)

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: str) -> str:
        return _validate_password_length(value)


class LoginRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    email: RequiredText
    password: str = Field(min_length=1)

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: str) -> str:
        return _validate_password_length(value)


class AuthResponse(BaseModel):
    success: bool
    message: str
    token: str
    user: UserResponse


@router.post('/register', response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    # The lookup and the insert are separate statements with no lock between
    # them, so two concurrent registrations for one email can both get past
    # the check. The unique constraint on users.email then fails the second.
    try:
        existing_user = db.query(User.id).filter(User.email == data.email).first()
        if existing_user is not None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='User already exists')

        user = User(
            full_name=data.full_name,
            email=data.email,
            phone=data.phone,
            class_level=data.class_level,
            password_hash=passwords.hash_password(data.password),
            is_active=True,
            trial_used=False,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception('Registration failed')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Registration failed',
        ) from exc

    logger.info('Registered user %s', user.id)
    token = jwt_handler.create_access_token(user.id, user.email)
    return {
        'success': True,
        'message': 'User registered successfully',
        'token': token,
        'user': UserResponse.model_validate(user),
    }


@router.post('/login', response_model=AuthResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    try:
        user = db.query(User).filter(User.email == data.email, User.is_active.is_(True)).first()
    except SQLAlchemyError as exc:
        logger.exception('Login lookup failed')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Login failed',
        ) from exc

    # Unknown email and wrong password must be indistinguishable, in timing too.
    password_hash = user.password_hash if user is not None else passwords.dummy_hash()
    password_matches = passwords.verify_password(data.password, password_hash)
    if user is None or not password_matches:
        logger.info('Rejected login attempt')
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    logger.info('User %s logged in', user.id)
    token = jwt_handler.create_access_token(user.id, user.email)
    return {
        'success': True,
        'message': 'Login successful',
        'token': token,
        'user': UserResponse.model_validate(user),
    }
