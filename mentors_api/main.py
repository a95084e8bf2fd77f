import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from mentors_api.core import config
from mentors_api.core.logging_config import configure_logging
from mentors_api.database import Base, engine, ensure_course_schema, ensure_user_schema
from mentors_api.models import course, user  # noqa: F401  (registers tables on Base)
from mentors_api.routes import admin_routes, auth_routes, course_routes, system_routes, user_routes

ALL_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS', 'HEAD']
MISSING_FIELD_ERRORS = {'missing', 'string_too_short'}

app = FastAPI(title='Marine Mentors API')

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(config.settings.cors_origins),
    allow_credentials='*' not in config.settings.cors_origins,
    allow_methods=['*'],
    allow_headers=['*'],
)

logger = logging.getLogger(__name__)


@app.on_event('startup')
def initialize_database() -> None:
    configure_logging(config.settings.log_level)
    config.validate_runtime_config()
    logger.warning('GET /api/admin/users is served without authentication.')
    try:
        Base.metadata.create_all(bind=engine)
        ensure_user_schema(engine)
        ensure_course_schema(engine)
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL and DB_SSL_MODE.')


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc.detail, dict):
        content = dict(exc.detail)
    else:
        content = {'error': exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, 'headers', None))


def _error_field(error: dict) -> str:
    location = [str(part) for part in error.get('loc', ()) if part != 'body']
    return '.'.join(location) or 'body'


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    fields = sorted({_error_field(error) for error in errors})
    if errors and all(error.get('type') in MISSING_FIELD_ERRORS for error in errors):
        content = {'error': 'All fields are required', 'fields': fields}
    else:
        content = {
            'error': 'Invalid request body',
            'fields': fields,
            'details': [error.get('msg', '') for error in errors],
        }
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error('Unhandled error on %s %s', request.method, request.url.path, exc_info=exc)
    content = {'error': 'Internal server error', 'message': str(exc)}
    if not config.settings.is_production:
        content['stack'] = ''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


app.include_router(system_routes.router)
app.include_router(auth_routes.router, prefix='/api/auth')
app.include_router(course_routes.router, prefix='/api/courses')
app.include_router(user_routes.router, prefix='/api/user')
app.include_router(admin_routes.router, prefix='/api/admin')


def available_routes() -> list[str]:
    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute) and route.include_in_schema:
            for method in sorted(route.methods):
                routes.append(f'{method} {route.path}')
    return routes


# Registered last so every real route is matched first.
@app.api_route('/{path:path}', methods=ALL_METHODS, include_in_schema=False)
def route_not_found(path: str, request: Request):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            'error': 'Route not found',
            'path': request.url.path,
            'availableRoutes': available_routes(),
        },
    )
