from functools import lru_cache

import bcrypt

BCRYPT_ROUNDS = 10
# bcrypt ignores everything past this many bytes of input.
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


@lru_cache(maxsize=1)
def dummy_hash() -> str:
    """Hash compared against when no account matches, at the same work factor as real ones."""
    return hash_password("unused-placeholder-password")


def verify_password(password: str, password_hash: str | None) -> bool:
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False
