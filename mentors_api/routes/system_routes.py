import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mentors_api.core import config
from mentors_api.database import check_connection, get_db

router = APIRouter(tags=['system'])

logger = logging.getLogger(__name__)


@router.get('/health')
def health():
    return {
        'status': 'OK',
        'message': 'Marine Mentors Backend is running!',
        'environment': config.settings.app_env,
        'timestamp': datetime.now(timezone.utc).isoformat(),
    }


@router.get('/api/test-db')
def check_database(db: Session = Depends(get_db)):
    try:
        timestamp = check_connection(db)
    except SQLAlchemyError as exc:
        logger.exception('Database connectivity check failed')
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={'error': 'Database connection failed', 'message': str(exc)},
        ) from exc

    return {
        'success': True,
        'message': 'Database connected successfully',
        'timestamp': timestamp,
    }
