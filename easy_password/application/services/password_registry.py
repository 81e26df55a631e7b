"""Registry of password generators and weakness checkers"""

import threading
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

import structlog

from easy_password.application.services.weakness_service import (
    WeaknessReport,
    assess_weakness,
)
from easy_password.domain.exceptions import (
    CheckerNotFound,
    GeneratorNotFound,
    InvalidGenerator,
)
from easy_password.infrastructure.config import Settings, get_settings

logger = structlog.get_logger(__name__)

Generator = Callable[[], str]
Checker = Callable[[str, bool], Any]


class PasswordRegistry:
    """
    Named generators and checkers plus the defaults used to pick them.

    Register everything at startup; lookups afterwards are safe from any
    thread. Mutations and reads are serialized by an internal lock, but
    generators and checkers themselves run outside of it.

    Generators are last-writer-wins. Checkers are first-writer-wins: a second
    registration under an existing name is ignored.
    """

    def __init__(
        self,
        hide: bool = True,
        default_generator: Optional[str] = None,
        default_checkers: Optional[Iterable[str]] = None,
    ):
        self._lock = threading.RLock()
        self._generators: Dict[str, Generator] = {}
        self._checkers: Dict[str, Checker] = {}
        self._default_generator = default_generator
        self._default_checkers: Optional[Tuple[str, ...]] = None
        self.hide = hide
        self.set_default_checkers(default_checkers)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "PasswordRegistry":
        """Build a registry whose defaults come from Settings"""
        settings = settings or get_settings()
        return cls(
            hide=settings.hide,
            default_generator=settings.default_generator,
            default_checkers=settings.default_checkers,
        )

    # Registration

    def register_generator(self, name: str, generator: Optional[Generator] = None):
        """
        Register a zero-argument callable returning a plain text password.

        Replaces any generator already registered under ``name``. Without
        ``generator`` this returns a decorator.
        """
        if generator is None:
            return lambda fn: self.register_generator(name, fn) or fn

        with self._lock:
            replaced = name in self._generators
            self._generators[name] = generator

        if replaced:
            logger.info("Generator replaced", generator=name)
        else:
            logger.debug("Generator registered", generator=name)

    def register_checker(self, name: str, checker: Optional[Checker] = None):
        """
        Register a ``(password, all_reasons)`` callable returning a CheckResult.

        Only the first registration under ``name`` is kept. Without
        ``checker`` this returns a decorator.
        """
        if checker is None:
            return lambda fn: self.register_checker(name, fn) or fn

        with self._lock:
            if name in self._checkers:
                logger.debug("Checker already registered, ignoring", checker=name)
                return
            self._checkers[name] = checker

        logger.debug("Checker registered", checker=name)

    # Defaults

    def set_default_generator(self, name: Optional[str]) -> None:
        with self._lock:
            self._default_generator = name

    def get_default_generator(self) -> Optional[str]:
        return self._default_generator

    def set_default_checkers(self, names: Optional[Iterable[str]]) -> None:
        """Checkers used when none are requested; None or empty means all"""
        names = tuple(dict.fromkeys(names)) if names is not None else ()
        with self._lock:
            self._default_checkers = names or None

    def get_default_checkers(self) -> Optional[Tuple[str, ...]]:
        return self._default_checkers

    # Lookups

    def generator_names(self) -> List[str]:
        with self._lock:
            return list(self._generators)

    def checker_names(self) -> List[str]:
        with self._lock:
            return list(self._checkers)

    def has_checkers(self) -> bool:
        with self._lock:
            return bool(self._checkers)

    def get_generator(self, name: str) -> Generator:
        with self._lock:
            generator = self._generators.get(name)
        if generator is None:
            logger.warning("Generator not found", generator=name)
            raise GeneratorNotFound(name)
        return generator

    def get_checker(self, name: str) -> Checker:
        with self._lock:
            checker = self._checkers.get(name)
        if checker is None:
            logger.warning("Checker not found", checker=name)
            raise CheckerNotFound(name)
        return checker

    def checker_items(self) -> List[Tuple[str, Checker]]:
        """Snapshot of every registered checker, in registration order"""
        with self._lock:
            return list(self._checkers.items())

    # Operations

    def generate(self, name: Optional[str] = None) -> str:
        """
        Generate a plain text password.

        Args:
            name: Generator name, defaults to the default generator

        Raises:
            InvalidGenerator: no name given and no default configured
            GeneratorNotFound: name was never registered
        """
        if name is None:
            name = self.get_default_generator()
        if name is None:
            raise InvalidGenerator()

        return self.get_generator(name)()

    def weakness(
        self, password: Any, *checkers: str, all_reasons: bool = True
    ) -> Optional[WeaknessReport]:
        """Assess ``password`` against this registry's checkers"""
        return assess_weakness(self, password, checkers, all_reasons=all_reasons)


# Global registry instance
_registry: Optional[PasswordRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> PasswordRegistry:
    """Get the process-wide registry, built from Settings on first use"""
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = PasswordRegistry.from_settings()
        return _registry


def reset_registry() -> None:
    """Forget the process-wide registry; the next get_registry() builds a new one"""
    global _registry
    with _registry_lock:
        _registry = None
