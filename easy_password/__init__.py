"""Pluggable password generators and weakness checkers, with legacy hash encodings

Register strategies once at startup::

    import secrets
    import easy_password

    easy_password.register_generator("random10", lambda: secrets.token_urlsafe(10))
    easy_password.get_registry().set_default_generator("random10")

    @easy_password.register_checker("too_short")
    def too_short(password, all_reasons):
        return len(password) < 8

Then generate, assess and encode::

    password = easy_password.Password()
    password.weakness()            # None or {"too_short": ["too_short"]}
    password.ntlm()
"""

from typing import Any, Optional

from easy_password.application.services.password_registry import (
    PasswordRegistry,
    get_registry,
    reset_registry,
)
from easy_password.application.services.weakness_service import WeaknessReport
from easy_password.domain.exceptions import (
    CheckerNotFound,
    EasyPasswordError,
    GeneratorNotFound,
    InvalidGenerator,
    UnsupportedCheckerResult,
)
from easy_password.domain.models.check_result import (
    CheckResult,
    Flagged,
    NoWeakness,
    Reasons,
    SingleReason,
    to_check_result,
)
from easy_password.application.services.password_value import Password
from easy_password.infrastructure.logging_config import configure_logging
from easy_password.infrastructure.security.legacy_hashes import (
    lmhash,
    md5,
    ntlm,
    sha,
    sha256,
)
from easy_password.infrastructure.security.password_validator import (
    PasswordValidator,
    register_defaults,
)

__version__ = "1.0.0"


def register_generator(name: str, generator=None):
    """Register a generator on the process-wide registry"""
    return get_registry().register_generator(name, generator)


def register_checker(name: str, checker=None):
    """Register a checker on the process-wide registry"""
    return get_registry().register_checker(name, checker)


def generate(name: Optional[str] = None) -> str:
    """Generate a plain text password with the process-wide registry"""
    return get_registry().generate(name)


def weakness(password: Any, *checkers: str, all_reasons: bool = True) -> Optional[WeaknessReport]:
    """Assess a password with the process-wide registry"""
    return get_registry().weakness(password, *checkers, all_reasons=all_reasons)


__all__ = [
    "PasswordRegistry",
    "get_registry",
    "reset_registry",
    "register_generator",
    "register_checker",
    "generate",
    "weakness",
    "WeaknessReport",
    "Password",
    "CheckResult",
    "NoWeakness",
    "Flagged",
    "SingleReason",
    "Reasons",
    "to_check_result",
    "EasyPasswordError",
    "InvalidGenerator",
    "GeneratorNotFound",
    "CheckerNotFound",
    "UnsupportedCheckerResult",
    "md5",
    "sha",
    "sha256",
    "ntlm",
    "lmhash",
    "PasswordValidator",
    "register_defaults",
    "configure_logging",
]
