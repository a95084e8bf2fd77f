import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mentors_api.database import get_db
from mentors_api.models.course import Course

router = APIRouter(tags=['courses'])

logger = logging.getLogger(__name__)


class CourseResponse(BaseModel):
    id: int
    title: str | None = None
    description: str | None = None
    class_level: str | None = None
    is_active: bool
    created_at: datetime | None = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class CourseListResponse(BaseModel):
    success: bool
    courses: list[CourseResponse]


def list_active_courses(db: Session) -> list[Course]:
    return db.query(Course).filter(Course.is_active.is_(True)).order_by(Course.id.asc()).all()


@router.get('', response_model=CourseListResponse)
def list_courses(db: Session = Depends(get_db)):
    try:
        courses = list_active_courses(db)
    except SQLAlchemyError as exc:
        logger.exception('Failed to fetch courses')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to fetch courses',
        ) from exc

    return {'success': True, 'courses': [CourseResponse.model_validate(course) for course in courses]}
