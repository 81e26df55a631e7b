"""Stock password generators and weakness checkers"""

import secrets
import string
from typing import TYPE_CHECKING, List, Optional, Union

import structlog

from easy_password.infrastructure.config import Settings, get_settings

if TYPE_CHECKING:
    from easy_password.application.services.password_registry import PasswordRegistry

logger = structlog.get_logger(__name__)

SYMBOLS = "!@#$%^&*()-_=+[]{}|;:,.<>?"


class PasswordValidator:
    """Generators and checkers ready to be registered on a PasswordRegistry"""

    def __init__(self, generated_length: int = 16, min_length: int = 8):
        self.generated_length = generated_length
        self.min_length = min_length

        # Common passwords list
        self.common_passwords = self._load_common_passwords()

        # Keyboard patterns
        self.keyboard_patterns = [
            "qwerty", "asdf", "zxcv", "123456", "abcdef",
            "qwertyuiop", "asdfghjkl", "zxcvbnm",
            "1234567890", "0987654321"
        ]

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "PasswordValidator":
        settings = settings or get_settings()
        return cls(generated_length=settings.generated_length, min_length=settings.min_length)

    # Generators

    def generate_secure_password(self) -> str:
        """Random password with at least one lowercase, uppercase, digit and symbol"""
        length = max(self.generated_length, 4)

        password = [
            secrets.choice(string.ascii_lowercase),
            secrets.choice(string.ascii_uppercase),
            secrets.choice(string.digits),
            secrets.choice(SYMBOLS),
        ]

        all_chars = string.ascii_letters + string.digits + SYMBOLS
        for _ in range(length - len(password)):
            password.append(secrets.choice(all_chars))

        secrets.SystemRandom().shuffle(password)

        return "".join(password)

    def generate_alphanumeric(self) -> str:
        """Random letters and digits"""
        alphabet = string.ascii_letters + string.digits
        return "".join(secrets.choice(alphabet) for _ in range(self.generated_length))

    # Checkers

    def check_character_classes(self, password: str, all_reasons: bool) -> Union[str, List[str], None]:
        """At least one digit, one uppercase and one lowercase letter"""
        failures = []
        if not any(c.isdigit() for c in password):
            failures.append("digit_needed")
        if not any(c.isupper() for c in password):
            failures.append("uppercase_needed")
        if not any(c.islower() for c in password):
            failures.append("lowercase_needed")

        if all_reasons:
            return failures
        return failures[0] if failures else None

    def check_length(self, password: str, all_reasons: bool) -> Optional[str]:
        if len(password) < self.min_length:
            return "too_short"
        return None

    def check_common(self, password: str, all_reasons: bool) -> bool:
        return password.lower() in self.common_passwords

    def check_patterns(self, password: str, all_reasons: bool) -> List[str]:
        """Repeated, sequential and keyboard-walk substrings"""
        checks = [
            ("repeated_chars", self._has_repeated_chars),
            ("sequential_chars", self._has_sequential_chars),
            ("keyboard_pattern", self._has_keyboard_patterns),
        ]

        failures = []
        for reason, check in checks:
            if check(password):
                failures.append(reason)
                if not all_reasons:
                    break
        return failures

    def _load_common_passwords(self) -> set:
        """Load common passwords list"""
        common = {
            "password", "123456", "password123", "admin", "qwerty",
            "letmein", "welcome", "monkey", "1234567890", "123456789",
            "password1", "abc123", "password1!", "admin123",
            "root", "toor", "pass", "test", "guest", "info", "adm",
            "mysql", "qwerty123", "123qwe", "123abc", "qwe123",
            "1q2w3e4r", "1qaz2wsx", "qwertyuiop", "asdfghjkl",
            "zxcvbnm", "987654321", "1234567", "12345678", "12345",
            "1234", "123", "dragon", "baseball", "football",
            "basketball", "superman", "michael", "jennifer", "joshua",
            "hunter", "2000", "test123", "batman", "trustno1",
            "thomas", "robert", "access", "love", "buster",
            "soccer", "hockey", "killer", "george", "andrew",
            "charlie", "dallas", "jessica", "pepper", "1111", "austin",
            "william", "daniel", "golfer", "summer", "heather", "hammer",
            "yankees", "maggie", "enter", "ashley", "thunder",
            "cowboy", "silver", "richard", "orange", "merlin",
            "michelle", "corvette", "bigdog", "cheese", "matthew", "patrick",
            "martin", "freedom", "ginger", "nicole", "sparky",
            "yellow", "camaro", "secret", "falcon", "taylor",
            "111111", "131313", "123123", "hello", "scooter",
            "please", "porsche", "guitar", "chelsea", "black", "diamond",
            "nascar", "jackson", "cameron", "654321", "computer", "amanda",
            "wizard", "xxxxxxxx", "money", "phoenix", "mickey", "bailey"
        }
        return common

    def _has_repeated_chars(self, password: str, threshold: int = 3) -> bool:
        """Check for repeated characters"""
        for i in range(len(password) - threshold + 1):
            if password[i:i+threshold] == password[i] * threshold:
                return True
        return False

    def _has_sequential_chars(self, password: str, threshold: int = 3) -> bool:
        """Check for sequential characters"""
        password_lower = password.lower()

        for i in range(len(password_lower) - threshold + 1):
            substring = password_lower[i:i+threshold]

            # Check ascending sequence
            if all(ord(substring[j+1]) == ord(substring[j]) + 1 for j in range(len(substring)-1)):
                return True

            # Check descending sequence
            if all(ord(substring[j+1]) == ord(substring[j]) - 1 for j in range(len(substring)-1)):
                return True

        return False

    def _has_keyboard_patterns(self, password: str) -> bool:
        """Check for keyboard patterns"""
        password_lower = password.lower()

        for pattern in self.keyboard_patterns:
            if pattern in password_lower or pattern[::-1] in password_lower:
                return True

        return False


def register_defaults(
    registry: "PasswordRegistry", validator: Optional[PasswordValidator] = None
) -> PasswordValidator:
    """
    Register the stock generators and checkers on ``registry``.

    Existing checkers keep precedence under the same name. The ``random``
    generator becomes the default when no default generator is set.
    """
    validator = validator or PasswordValidator.from_settings()

    registry.register_generator("random", validator.generate_secure_password)
    registry.register_generator("alphanumeric", validator.generate_alphanumeric)

    registry.register_checker("aA1", validator.check_character_classes)
    registry.register_checker("length", validator.check_length)
    registry.register_checker("common", validator.check_common)
    registry.register_checker("patterns", validator.check_patterns)

    if registry.get_default_generator() is None:
        registry.set_default_generator("random")

    logger.debug(
        "Stock generators and checkers registered",
        generators=registry.generator_names(),
        checkers=registry.checker_names(),
    )
    return validator
