from datetime import datetime, timedelta, timezone

import jwt

from backend.core import config
from backend.core.errors import InvalidOrExpiredToken


class TokenService:
    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        lifetime: timedelta = timedelta(days=7),
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.lifetime = lifetime

    def issue(self, claims: dict, lifetime: timedelta | None = None) -> str:
        now = datetime.now(timezone.utc)
        payload = dict(claims)
        payload.update({"iat": now, "exp": now + (lifetime if lifetime is not None else self.lifetime)})
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> dict:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError as exc:
            raise InvalidOrExpiredToken() from exc


token_service = TokenService(
    secret=config.JWT_SECRET,
    algorithm=config.JWT_ALGORITHM,
    lifetime=timedelta(days=config.JWT_EXPIRES_DAYS),
)


def get_token_service() -> TokenService:
    return token_service
