"""Password value object"""

from dataclasses import dataclass, field
from typing import Optional

from easy_password.application.services.password_registry import (
    PasswordRegistry,
    get_registry,
)
from easy_password.application.services.weakness_service import WeaknessReport
from easy_password.infrastructure.security import legacy_hashes

MASK = "********"


@dataclass(frozen=True, repr=False)
class Password:
    """
    Immutable plain text password.

    Without ``raw`` a password is generated with the registry's default
    generator. Rendering goes through display(), which masks the value
    unless the registry's ``hide`` flag is turned off.
    """

    raw: Optional[str] = None
    registry: Optional[PasswordRegistry] = field(default=None, compare=False)

    def __post_init__(self):
        registry = self.registry or get_registry()
        object.__setattr__(self, "registry", registry)
        if self.raw is None:
            object.__setattr__(self, "raw", registry.generate())
        elif not isinstance(self.raw, str):
            raise TypeError(f"password must be a str, not {type(self.raw).__name__}")

    def display(self) -> str:
        """Plain text when hiding is disabled, ******** otherwise"""
        return self.raw if self.registry.hide is False else MASK

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"Password({self.display()!r})"

    def md5(self) -> str:
        return legacy_hashes.md5(self.raw)

    def sha(self) -> str:
        return legacy_hashes.sha(self.raw)

    def sha256(self) -> str:
        return legacy_hashes.sha256(self.raw)

    def ntlm(self) -> str:
        return legacy_hashes.ntlm(self.raw)

    def lmhash(self) -> str:
        return legacy_hashes.lmhash(self.raw)

    def weakness(self, *checkers: str, all_reasons: bool = True) -> Optional[WeaknessReport]:
        """Check for weakness using the registry this password was built with"""
        return self.registry.weakness(self.raw, *checkers, all_reasons=all_reasons)
