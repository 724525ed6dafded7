from typing import Optional
from email_validator import validate_email, EmailNotValidError

MAX_NAME_LENGTH = 100

def validate_name(value: str, field: str = "Name") -> tuple[bool, str]:
    value = value.strip()
    if not value:
        return False, f"{field} is required"
    if len(value) > MAX_NAME_LENGTH:
        return False, f"{field} must not exceed {MAX_NAME_LENGTH} characters"
    return True, ""

def normalize_and_validated_email(email: str) -> Optional[str]:
    try:
        validated = validate_email(email, check_deliverability=False)
        return validated.normalized
    except EmailNotValidError:
        return None
