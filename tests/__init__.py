"""Test package. Settings are read at import time, so test defaults are set before app imports."""

import os

os.environ.setdefault("APP_ENV", "dev")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-signing-secret-with-enough-bytes-for-hs256")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
