from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from backend.auth.jwt_handler import TokenService, get_token_service
from backend.core import config
from backend.core.errors import AuthError, ForbiddenError

security = HTTPBearer(auto_error=False)


def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    tokens: TokenService = Depends(get_token_service),
) -> dict:
    if credentials is None:
        raise AuthError("Authentication required")

    payload = tokens.verify(credentials.credentials)
    if payload.get("id") is None or not payload.get("role"):
        raise AuthError("Invalid token subject")
    return payload


def guards_enabled() -> bool:
    return config.ENFORCE_ROLE_GUARDS


def require_role(*roles: str):
    """Build a dependency that only lets tokens carrying one of ``roles`` through.

    With role guards disabled the dependency resolves to ``None`` without
    looking at the request.
    """

    def dependency(
        enabled: bool = Depends(guards_enabled),
        credentials: HTTPAuthorizationCredentials | None = Depends(security),
        tokens: TokenService = Depends(get_token_service),
    ) -> dict | None:
        if not enabled:
            return None

        identity = get_current_identity(credentials, tokens)
        if identity.get("role") not in roles:
            raise ForbiddenError("Admin access required" if roles == ("admin",) else "Insufficient role")
        return identity

    return dependency


require_admin = require_role("admin")
