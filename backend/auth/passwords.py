from passlib.context import CryptContext

from backend.core import config


class PasswordHasher:
    """Salted bcrypt hashing with a fixed work factor."""

    def __init__(self, rounds: int = config.BCRYPT_ROUNDS):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, plaintext: str) -> str:
        return self._context.hash(plaintext)

    def verify(self, plaintext: str, digest: str | None) -> bool:
        if not plaintext or not digest:
            return False
        try:
            return self._context.verify(plaintext, digest)
        except ValueError:
            # Digest is not a bcrypt hash.
            return False


password_hasher = PasswordHasher()


def get_password_hasher() -> PasswordHasher:
    return password_hasher
