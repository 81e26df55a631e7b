"""Domain errors raised by the registry and the weakness aggregator"""

from typing import Any, Optional


class EasyPasswordError(Exception):
    """Base exception for password registry errors"""

    pass


class InvalidGenerator(EasyPasswordError, ValueError):
    """No generator name given and no default generator configured"""

    def __init__(self, message: str = "invalid generator type"):
        super().__init__(message)


class GeneratorNotFound(EasyPasswordError, LookupError):
    """Requested generator has never been registered"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"requested generator '{name}' doesn't exist")


class CheckerNotFound(EasyPasswordError, KeyError):
    """Requested checker has never been registered"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"requested checker '{name}' doesn't exist")

    def __str__(self) -> str:
        # KeyError would otherwise render the quoted repr of the message
        return self.args[0]


class UnsupportedCheckerResult(EasyPasswordError, TypeError):
    """A checker returned something outside the CheckResult protocol"""

    def __init__(self, value: Any, checker: Optional[str] = None):
        self.value = value
        self.checker = checker
        where = f" from checker '{checker}'" if checker else ""
        super().__init__(
            f"unsupported checker return value{where}: {type(value).__name__}"
        )
