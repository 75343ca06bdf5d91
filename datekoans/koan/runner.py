"""Running koans and reporting progress.

KoanRunner collects the koans of registered suites, runs them in
definition order and returns a RunReport. A learner works through the
koans one at a time, so by default the run stops at the first koan that
does not pass.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable

from datekoans.errors import KoanFailure, KoanIncomplete, KoanLookupError
from datekoans.koan.decorators import is_koan
from datekoans.koan.registry import SuiteRegistry, default_registry

logger = logging.getLogger(__name__)


class KoanStatus(Enum):
    """Outcome of running one koan."""

    PASSED = "passed"
    FAILED = "failed"
    INCOMPLETE = "incomplete"
    ERROR = "error"


@dataclass(frozen=True)
class KoanCase:
    """A koan ready to run: its suite, name and the unbound method."""

    suite: str
    name: str
    suite_class: type
    method: Callable[..., object]

    @property
    def qualified_name(self) -> str:
        return f"{self.suite}.{self.name}"


@dataclass(frozen=True)
class KoanResult:
    """The outcome of one koan."""

    suite: str
    koan: str
    status: KoanStatus
    message: str = ""

    @property
    def passed(self) -> bool:
        return self.status is KoanStatus.PASSED


@dataclass(frozen=True)
class RunReport:
    """Results of a run, in execution order.

    Attributes:
        results: One KoanResult per executed koan.
        total: Number of koans selected, executed or not.
    """

    results: list[KoanResult] = field(default_factory=list)
    total: int = 0

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def progress(self) -> float:
        """Fraction of selected koans that passed, 0.0 to 1.0."""
        if self.total == 0:
            return 1.0
        return self.passed / self.total

    @property
    def ok(self) -> bool:
        """True if every selected koan ran and passed."""
        return self.passed == self.total

    @property
    def first_unsuccessful(self) -> KoanResult | None:
        return next((r for r in self.results if not r.passed), None)

    def summary(self) -> str:
        """Return e.g. "3/7 koans complete"."""
        return f"{self.passed}/{self.total} koans complete"


def collect_koans(suite_class: type, suite_name: str | None = None) -> list[KoanCase]:
    """Return the koans of a suite class in definition order."""
    name = suite_name or suite_class.__name__
    methods = [
        member
        for member in vars(suite_class).values()
        if is_koan(member)
    ]
    methods.sort(key=lambda m: m._koan_order)
    return [KoanCase(name, m._koan_name, suite_class, m) for m in methods]


class KoanRunner:
    """Runs koans from a registry.

    Args:
        registry: Where suites are looked up; defaults to the shared
            registry that @suite fills.
        keep_going: Run every selected koan instead of stopping at the
            first one that does not pass.

    Examples:
        >>> import datekoans.koans  # registers AboutLocalDate
        >>> report = KoanRunner().run(["AboutLocalDate"])
        >>> report.summary()
        '7/7 koans complete'
    """

    def __init__(
        self,
        registry: SuiteRegistry | None = None,
        *,
        keep_going: bool = False,
    ) -> None:
        self.registry = registry if registry is not None else default_registry
        self.keep_going = keep_going

    def collect(
        self,
        suites: Iterable[str] | None = None,
        koan: str | None = None,
    ) -> list[KoanCase]:
        """Return the selected koans in run order.

        Args:
            suites: Suite names; all registered suites when None or empty.
            koan: Only the koan with this name (or "Suite.name").

        Raises:
            KoanLookupError: If a suite or the koan does not exist.
        """
        names = list(suites) if suites else self.registry.names()
        cases: list[KoanCase] = []
        for name in names:
            cases.extend(collect_koans(self.registry.get(name), name))

        if koan is not None:
            cases = [c for c in cases if koan in (c.name, c.qualified_name)]
            if not cases:
                raise KoanLookupError(f"no koan named {koan!r}")
        return cases

    def run(
        self,
        suites: Iterable[str] | None = None,
        koan: str | None = None,
        on_result: Callable[[KoanResult], None] | None = None,
    ) -> RunReport:
        """Run the selected koans.

        Args:
            suites: Suite names; all registered suites when None or empty.
            koan: Only the koan with this name.
            on_result: Called with each result as soon as it is known.

        Raises:
            KoanLookupError: If a suite or the koan does not exist.
        """
        cases = self.collect(suites, koan)
        report = RunReport(total=len(cases))
        for case in cases:
            result = self.run_one(case)
            report.results.append(result)
            if on_result is not None:
                on_result(result)
            if not result.passed and not self.keep_going:
                break
        logger.debug("Run finished: %s", report.summary())
        return report

    def run_one(self, case: KoanCase) -> KoanResult:
        """Run a single koan on a fresh suite instance.

        Exceptions raised by the koan become FAILED, INCOMPLETE or ERROR
        results.
        """
        logger.debug("Running koan %s", case.qualified_name)
        try:
            case.method(case.suite_class())
        except KoanIncomplete as e:
            result = KoanResult(case.suite, case.name, KoanStatus.INCOMPLETE, str(e))
        except KoanFailure as e:
            result = KoanResult(case.suite, case.name, KoanStatus.FAILED, str(e))
        except Exception as e:
            result = KoanResult(
                case.suite, case.name, KoanStatus.ERROR, f"{type(e).__name__}: {e}"
            )
        else:
            result = KoanResult(case.suite, case.name, KoanStatus.PASSED)

        if not result.passed:
            logger.info(
                "Koan %s %s: %s", case.qualified_name, result.status.value, result.message
            )
        return result


__all__ = [
    "KoanCase",
    "KoanResult",
    "KoanRunner",
    "KoanStatus",
    "RunReport",
    "collect_koans",
]
