"""Registry, weakness assessment and the Password value"""

from .password_registry import (
    PasswordRegistry,
    get_registry,
    reset_registry,
)
from .password_value import Password
from .weakness_service import WeaknessReport, assess_weakness

__all__ = [
    "PasswordRegistry",
    "get_registry",
    "reset_registry",
    "Password",
    "WeaknessReport",
    "assess_weakness",
]
