from .dependencies import get_current_user, get_current_user_id
from .security import (
    generate_fake_hash, validate_password,
    verify_user_password, verify_password, get_password_hash
)
from .validators import validate_name, normalize_and_validated_email
from .tokens import authenticate, issue_token, create_access_token, create_simple_token
from .permissions import is_portfolio_owner, ensure_portfolio_owner, ensure_investment_in_portfolio

__all__ = [
    "get_current_user", "get_current_user_id",
    "generate_fake_hash", "validate_password",
    "verify_user_password", "verify_password", "get_password_hash",
    "validate_name", "normalize_and_validated_email",
    "authenticate", "issue_token", "create_access_token", "create_simple_token",
    "is_portfolio_owner", "ensure_portfolio_owner", "ensure_investment_in_portfolio",
]
