import logging
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend import database
from backend.auth.passwords import get_password_hasher
from backend.bootstrap import initialize_database
from backend.core import config
from backend.core.errors import AppError, ServerError
from backend.routes import announcement_routes, auth_routes, user_routes

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
)

app = FastAPI(title='Skwela Alert API')

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=config.CORS_ORIGINS != ['*'],
    allow_methods=['*'],
    allow_headers=['*'],
)

logger = logging.getLogger(__name__)


@app.on_event('startup')
def on_startup() -> None:
    config.validate_runtime_config()
    initialize_database(database.engine, database.SessionLocal, get_password_hasher())
    logger.info('Skwela Alert API ready (environment: %s)', config.APP_ENV)


@app.exception_handler(AppError)
def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={'error': exc.message})


@app.exception_handler(SQLAlchemyError)
def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error('Database error while handling %s %s', request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=ServerError.status_code, content={'error': ServerError.default_message})


@app.exception_handler(RequestValidationError)
def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info('Rejected request body for %s: %s', request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={'error': 'Invalid request body'})


@app.exception_handler(StarletteHTTPException)
def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={'error': exc.detail}, headers=exc.headers)


@app.exception_handler(Exception)
def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error('Unhandled error while handling %s %s', request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=ServerError.status_code, content={'error': ServerError.default_message})


@app.get('/')
def root():
    return {
        'message': 'Welcome to Skwela Alert API',
        'status': 'running',
        'endpoints': {
            'health': '/api/health',
            'register': 'POST /api/auth/register',
            'login': 'POST /api/auth/login',
            'adminLogin': 'POST /api/auth/admin-login',
            'me': 'GET /api/auth/me',
            'users': 'GET /api/users',
            'announcements': 'GET /api/announcements',
            'createAnnouncement': 'POST /api/announcements',
        },
    }


@app.get('/api/health')
def health():
    return {
        'status': 'OK',
        'message': 'Skwela Alert Backend is running',
        'timestamp': datetime.now(timezone.utc).isoformat(),
    }


app.include_router(auth_routes.router, prefix='/api/auth')
app.include_router(user_routes.router, prefix='/api/users')
app.include_router(announcement_routes.router, prefix='/api/announcements')


def main() -> None:
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == '__main__':
    main()
