import os

from dotenv import load_dotenv

# Override=True so edits to .env take effect on process reload.
# Tests set DISABLE_DOTENV=1 so a developer's .env can't leak into them.
if os.getenv("DISABLE_DOTENV") != "1":
    load_dotenv(override=True)

SERVICE_NAME = "Student Job Board"

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000") or "3000")

LOG_LEVEL = (os.getenv("LOG_LEVEL", "INFO") or "INFO").strip().upper()

# CORS is open by default; FRONTEND_ORIGINS narrows it to an explicit list.
FRONTEND_ORIGINS = [
    origin.strip()
    for origin in os.getenv("FRONTEND_ORIGINS", "").split(",")
    if origin.strip()
]

# -------------------- Password hashing --------------------
# bcrypt accepts cost factors 4..31. Each step doubles the hashing time.
BCRYPT_MIN_ROUNDS = 4
BCRYPT_MAX_ROUNDS = 31
DEFAULT_BCRYPT_ROUNDS = 10


def _clamp_rounds(raw: str | None) -> int:
    try:
        rounds = int(raw) if raw not in (None, "") else DEFAULT_BCRYPT_ROUNDS
    except ValueError:
        return DEFAULT_BCRYPT_ROUNDS
    return max(BCRYPT_MIN_ROUNDS, min(BCRYPT_MAX_ROUNDS, rounds))


BCRYPT_ROUNDS = _clamp_rounds(os.getenv("BCRYPT_ROUNDS"))
