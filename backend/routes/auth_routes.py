from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.auth.dependencies import get_current_identity
from backend.auth.jwt_handler import TokenService, get_token_service
from backend.auth.passwords import PasswordHasher, get_password_hasher
from backend.database import get_db
from backend.schemas.auth import (
    AdminLoginRequest,
    AdminLoginResponse,
    AdminResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)
from backend.services.auth_service import AuthService

router = APIRouter(tags=['auth'])


def get_auth_service(
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(db, hasher, tokens)


@router.post('/register', response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    user = service.register(data)
    return RegisterResponse(
        message='User registered successfully',
        user=UserResponse.model_validate(user),
    )


@router.post('/login', response_model=LoginResponse)
def login(data: LoginRequest, service: AuthService = Depends(get_auth_service)):
    token, user = service.login(data)
    return LoginResponse(
        message='Login successful',
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.post('/admin-login', response_model=AdminLoginResponse)
def admin_login(data: AdminLoginRequest, service: AuthService = Depends(get_auth_service)):
    token, admin = service.admin_login(data)
    return AdminLoginResponse(
        message='Admin login successful',
        token=token,
        admin=AdminResponse(id=admin.id, username=admin.username, role='admin'),
    )


@router.get('/me')
def me(identity: dict = Depends(get_current_identity)):
    return {key: value for key, value in identity.items() if key not in {'exp', 'iat'}}
