from .password_manager import PasswordManager
from .token_manager import TokenManager, TokenType

__all__ = [
    "PasswordManager",
    "TokenManager",
    "TokenType",
]
