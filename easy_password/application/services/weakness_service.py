"""Weakness assessment across registered checkers"""

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

import structlog

from easy_password.domain.exceptions import UnsupportedCheckerResult
from easy_password.domain.models.check_result import to_check_result

if TYPE_CHECKING:
    from easy_password.application.services.password_registry import PasswordRegistry

logger = structlog.get_logger(__name__)

WeaknessReport = Dict[str, List[str]]


def _plaintext(password: Any) -> str:
    # Password values are unwrapped; anything else must already be a str
    return password if isinstance(password, str) else password.raw


def assess_weakness(
    registry: "PasswordRegistry",
    password: Any,
    checkers: Iterable[str] = (),
    all_reasons: bool = True,
) -> Optional[WeaknessReport]:
    """
    Run checkers against a password and collect their reasons.

    Checkers are resolved from ``checkers``, else from the registry's
    default checkers, else every registered checker. All names are looked
    up before any checker runs, so an unknown name aborts the call without
    a partial report.

    With ``all_reasons`` false the first checker reporting anything wins and
    only its first reason is kept; remaining checkers are not invoked.

    Args:
        registry: Registry holding the checkers
        password: Plain text password or Password value
        checkers: Checker names, in evaluation order
        all_reasons: Report every reason from every checker

    Returns:
        Mapping of checker name to reasons, or None when nothing was found
        or no checker is registered

    Raises:
        CheckerNotFound: a requested checker was never registered
        UnsupportedCheckerResult: a checker returned an unsupported value
    """
    if not registry.has_checkers():
        return None

    plaintext = _plaintext(password)

    names = list(dict.fromkeys(checkers)) or list(registry.get_default_checkers() or ())
    if names:
        resolved = [(name, registry.get_checker(name)) for name in names]
    else:
        resolved = registry.checker_items()

    report: WeaknessReport = {}
    for name, checker in resolved:
        try:
            result = to_check_result(checker(plaintext, all_reasons), name)
        except UnsupportedCheckerResult as e:
            e.checker = e.checker or name
            logger.error("Unsupported checker result", checker=name, error=str(e))
            raise

        reasons = result.for_checker(name)
        if not reasons:
            continue

        if not all_reasons:
            report[name] = reasons[:1]
            break
        report[name] = reasons

    logger.debug(
        "Weakness assessed",
        checkers=[name for name, _ in resolved],
        flagged=list(report),
        all_reasons=all_reasons,
    )
    return report or None
