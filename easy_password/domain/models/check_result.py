"""Checker result variants

A checker returns one of:

- ``NoWeakness``: nothing found (plain ``None``/``False`` are accepted too)
- ``Flagged``: weak, and the reason is the checker's own name (``True``)
- ``SingleReason``: one named reason (a plain ``str``)
- ``Reasons``: zero or more named reasons (a plain ``list``/``tuple``)

``to_check_result`` turns the plain Python shapes into these variants and
rejects everything else with ``UnsupportedCheckerResult``.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Union

from easy_password.domain.exceptions import UnsupportedCheckerResult


@dataclass(frozen=True)
class NoWeakness:
    """No weakness found"""

    def for_checker(self, checker: str) -> List[str]:
        return []


@dataclass(frozen=True)
class Flagged:
    """Weakness found, reported under the checker's name"""

    def for_checker(self, checker: str) -> List[str]:
        return [checker]


@dataclass(frozen=True)
class SingleReason:
    """A single weakness reason"""

    reason: str

    def __post_init__(self):
        if not isinstance(self.reason, str):
            raise UnsupportedCheckerResult(self.reason)

    def for_checker(self, checker: str) -> List[str]:
        return [self.reason]


@dataclass(frozen=True)
class Reasons:
    """Zero or more weakness reasons, in the order the checker gave them"""

    reasons: Tuple[str, ...] = ()

    def __post_init__(self):
        # a bare string would otherwise split into one reason per character
        if isinstance(self.reasons, (str, bytes)):
            raise UnsupportedCheckerResult(self.reasons)
        reasons = tuple(self.reasons)
        if not all(isinstance(reason, str) for reason in reasons):
            raise UnsupportedCheckerResult(self.reasons)
        object.__setattr__(self, "reasons", reasons)

    def for_checker(self, checker: str) -> List[str]:
        return list(self.reasons)


CheckResult = Union[NoWeakness, Flagged, SingleReason, Reasons]

NO_WEAKNESS = NoWeakness()
FLAGGED = Flagged()

_VARIANTS = (NoWeakness, Flagged, SingleReason, Reasons)


def to_check_result(value: Any, checker: Optional[str] = None) -> CheckResult:
    """
    Normalize a raw checker return value

    Args:
        value: Whatever the checker returned
        checker: Checker name, only used to enrich the error

    Returns:
        One of the CheckResult variants

    Raises:
        UnsupportedCheckerResult: value is outside the protocol
    """
    if isinstance(value, _VARIANTS):
        return value

    # bool before anything else: True/False are ints too
    if value is None or value is False:
        return NO_WEAKNESS
    if value is True:
        return FLAGGED
    if isinstance(value, str):
        return SingleReason(value)
    if isinstance(value, (list, tuple)):
        if not all(isinstance(reason, str) for reason in value):
            raise UnsupportedCheckerResult(value, checker)
        return Reasons(tuple(value)) if value else NO_WEAKNESS

    raise UnsupportedCheckerResult(value, checker)
