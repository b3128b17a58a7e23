import bcrypt

BCRYPT_ROUNDS = 10
# bcrypt only looks at the first 72 bytes and newer releases reject longer input
BCRYPT_MAX_BYTES = 72


def _encode(raw_password: str) -> bytes:
    return raw_password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def get_password_hash(raw_password: str) -> str:
    """Returns a salted bcrypt hash suitable for storage."""
    return bcrypt.hashpw(_encode(raw_password), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(raw_password: str, hashed_password: str) -> bool:
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(_encode(raw_password), hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
