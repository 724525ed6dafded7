import secrets
from typing import Optional, Tuple
from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_LENGTH = 128

_fake_hash: Optional[str] = None

def generate_fake_hash() -> str:
    global _fake_hash
    if _fake_hash is None:
        _fake_hash = pwd_context.hash(secrets.token_urlsafe(32))
    return _fake_hash

def validate_password(password: str) -> Tuple[bool, str]:
    if len(password) < MIN_PASSWORD_LENGTH:
        return False, f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    if len(password) > MAX_PASSWORD_LENGTH:
        return False, "Password is too long"
    return True, ""

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def verify_user_password(user, password: str) -> bool:
    # Hash against a throwaway value when the user is missing so both paths cost the same.
    provided_hash = user.hashed_password if user else generate_fake_hash()
    is_valid = pwd_context.verify(password, provided_hash)
    return bool(user) and is_valid

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)
