import bcrypt

from ..config import BCRYPT_ROUNDS

# bcrypt only ever reads the first 72 bytes of a password. Recent releases of the
# `bcrypt` package raise on longer input instead of truncating, so cut it here.
BCRYPT_MAX_PASSWORD_BYTES = 72


def _password_bytes(password: str) -> bytes:
    # JSON bodies can carry lone surrogates ("\ud800"); encode them as-is
    # rather than failing, the same way for hashing and checking.
    return password.encode("utf-8", errors="surrogatepass")[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """
    Hash a password with a fresh bcrypt salt at the given cost factor.

    Returns the modular-crypt string (``$2b$<rounds>$...``) so the salt and
    cost travel with the hash.
    """
    if not password:
        raise ValueError("Password is required")

    hashed = bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    # checkpw compares in constant time. A malformed hash raises ValueError,
    # which callers treat as an internal failure rather than a bad password.
    if not password or not hashed:
        return False
    return bcrypt.checkpw(_password_bytes(password), hashed.encode("utf-8"))
