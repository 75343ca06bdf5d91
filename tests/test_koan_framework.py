"""Tests for the koan framework: placeholder, assertions, registry and runner."""

from __future__ import annotations

import logging

import pytest

from datekoans.errors import KoanFailure, KoanIncomplete, KoanLookupError
from datekoans.koan import (
    KoanResult,
    KoanRunner,
    KoanStatus,
    Placeholder,
    RunReport,
    SuiteRegistry,
    __,
    assert_equals,
    assert_false,
    assert_not_same,
    assert_same,
    assert_true,
    collect_koans,
    default_registry,
    is_koan,
    is_placeholder,
    koan,
    suite,
)


# =============================================================================
# Placeholder and Assertion Tests
# =============================================================================


class TestPlaceholder:
    """Tests for the __ placeholder."""

    def test_singleton(self) -> None:
        """There is only one placeholder."""
        assert Placeholder() is __
        assert is_placeholder(__)
        assert not is_placeholder(None)

    def test_comparison_is_incomplete(self) -> None:
        """Comparing the placeholder either way round raises KoanIncomplete."""
        with pytest.raises(KoanIncomplete):
            __ == 0  # noqa: B015
        with pytest.raises(KoanIncomplete):
            __ != "__"  # noqa: B015
        with pytest.raises(KoanIncomplete):
            366 == __  # noqa: B015
        with pytest.raises(KoanIncomplete):
            366 != __  # noqa: B015

    def test_hashable(self) -> None:
        """The placeholder can still be used as a set member by identity."""
        assert len({__, __}) == 1

    def test_repr_and_bool(self) -> None:
        """It prints as __ and is falsy."""
        assert repr(__) == "__"
        assert not __


class TestAssertions:
    """Tests for koan assertions."""

    def test_assert_equals(self) -> None:
        """Equal values pass and unequal values fail with both shown."""
        assert_equals(33, 33)
        with pytest.raises(KoanFailure, match="expected 32 but was 33"):
            assert_equals(33, 32)

    def test_placeholder_is_incomplete(self) -> None:
        """A blank answer is incomplete, not failed."""
        with pytest.raises(KoanIncomplete):
            assert_equals(33, __)
        with pytest.raises(KoanIncomplete):
            assert_true(__)

    def test_failure_is_an_assertion_error(self) -> None:
        """Koan failures are assertion errors."""
        with pytest.raises(AssertionError):
            assert_false(True)

    def test_truth(self) -> None:
        """assert_true and assert_false check truthiness."""
        assert_true(1)
        assert_false(0)
        with pytest.raises(KoanFailure):
            assert_true([])

    def test_identity(self) -> None:
        """assert_same and assert_not_same check identity."""
        marker = object()
        assert_same(marker, marker)
        assert_not_same(marker, object())
        with pytest.raises(KoanFailure):
            assert_same(marker, object())
        with pytest.raises(KoanFailure):
            assert_not_same(marker, marker)


# =============================================================================
# Decorator and Registry Tests
# =============================================================================


class TestDecorators:
    """Tests for @koan and @suite."""

    def test_koan_marks_method(self) -> None:
        """@koan keeps the function and records its name."""

        @koan
        def first(self: object) -> None:
            pass

        @koan(name="second koan")
        def second(self: object) -> None:
            pass

        assert is_koan(first)
        assert first._koan_name == "first"  # type: ignore[attr-defined]
        assert second._koan_name == "second koan"  # type: ignore[attr-defined]
        assert first._koan_order < second._koan_order  # type: ignore[attr-defined]

    def test_plain_function_is_not_koan(self) -> None:
        """Undecorated functions are not koans."""
        assert not is_koan(lambda: None)
        assert not is_koan("first")

    def test_suite_registers(self) -> None:
        """@suite adds the class to the given registry."""
        registry = SuiteRegistry()

        @suite(registry=registry)
        class AboutNothing:
            pass

        @suite(name="Renamed", registry=registry)
        class AboutSomething:
            pass

        assert registry.names() == ["AboutNothing", "Renamed"]
        assert registry.get("Renamed") is AboutSomething
        assert "AboutNothing" in registry
        assert len(registry) == 2

    def test_suite_uses_empty_registry(self) -> None:
        """An empty registry still receives the suite instead of the default one."""
        registry = SuiteRegistry()
        assert len(registry) == 0

        @suite(registry=registry)
        class AboutEmptyRegistry:
            pass

        assert registry.get("AboutEmptyRegistry") is AboutEmptyRegistry
        assert "AboutEmptyRegistry" not in default_registry


class TestSuiteRegistry:
    """Tests for SuiteRegistry."""

    def test_register_same_class_twice(self) -> None:
        """Registering the same class again is harmless."""
        registry = SuiteRegistry()

        class AboutNothing:
            pass

        registry.register(AboutNothing)
        registry.register(AboutNothing)
        assert registry.names() == ["AboutNothing"]

    def test_duplicate_name(self) -> None:
        """A different class cannot take an existing name."""
        registry = SuiteRegistry()

        class First:
            pass

        class Second:
            pass

        registry.register(First, name="About")
        with pytest.raises(ValueError, match="already registered"):
            registry.register(Second, name="About")

    def test_unknown_suite(self) -> None:
        """Looking up a missing suite lists the known ones."""
        registry = SuiteRegistry()

        class AboutNothing:
            pass

        registry.register(AboutNothing)
        with pytest.raises(KoanLookupError, match="AboutNothing"):
            registry.get("AboutEverything")

    def test_registration_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Registration logs at debug level."""
        registry = SuiteRegistry()

        class AboutNothing:
            pass

        with caplog.at_level(logging.DEBUG, logger="datekoans.koan.registry"):
            registry.register(AboutNothing)
        assert "AboutNothing" in caplog.text


# =============================================================================
# Runner Tests
# =============================================================================


@pytest.fixture
def registry() -> SuiteRegistry:
    """A private registry with one suite of mixed outcomes."""
    registry = SuiteRegistry()

    @suite(registry=registry)
    class AboutOutcomes:
        @koan
        def passes(self) -> None:
            assert_equals(1 + 1, 2)

        @koan
        def blank(self) -> None:
            assert_equals(1 + 1, __)

        @koan
        def fails(self) -> None:
            assert_equals(1 + 1, 3)

        @koan
        def crashes(self) -> None:
            raise ZeroDivisionError("division by zero")

        def helper(self) -> None:
            pass

    @suite(registry=registry)
    class AboutPassing:
        @koan
        def one(self) -> None:
            assert_true(True)

        @koan
        def two(self) -> None:
            assert_false(False)

    return registry


class TestCollect:
    """Tests for collecting koans."""

    def test_definition_order(self, registry: SuiteRegistry) -> None:
        """Koans are collected in the order they are written."""
        cases = collect_koans(registry.get("AboutOutcomes"))
        assert [c.name for c in cases] == ["passes", "blank", "fails", "crashes"]
        assert cases[0].qualified_name == "AboutOutcomes.passes"

    def test_all_suites_by_default(self, registry: SuiteRegistry) -> None:
        """With no suite names every suite is collected."""
        assert len(KoanRunner(registry).collect()) == 6

    def test_select_koan(self, registry: SuiteRegistry) -> None:
        """A koan can be picked by name or qualified name."""
        runner = KoanRunner(registry)
        assert [c.name for c in runner.collect(koan="two")] == ["two"]
        assert [c.name for c in runner.collect(koan="AboutOutcomes.fails")] == ["fails"]

    def test_unknown_koan(self, registry: SuiteRegistry) -> None:
        """Asking for a missing koan is an error."""
        with pytest.raises(KoanLookupError):
            KoanRunner(registry).collect(["AboutPassing"], koan="fails")

    def test_unknown_suite(self, registry: SuiteRegistry) -> None:
        """Asking for a missing suite is an error."""
        with pytest.raises(KoanLookupError):
            KoanRunner(registry).run(["AboutNothing"])


class TestRun:
    """Tests for running koans."""

    def test_stops_at_first_unsuccessful(self, registry: SuiteRegistry) -> None:
        """By default the run stops at the first koan that does not pass."""
        report = KoanRunner(registry).run(["AboutOutcomes"])
        assert [r.status for r in report.results] == [KoanStatus.PASSED, KoanStatus.INCOMPLETE]
        assert report.total == 4
        assert report.summary() == "1/4 koans complete"
        assert not report.ok

    def test_keep_going(self, registry: SuiteRegistry) -> None:
        """keep_going runs everything and records each outcome."""
        report = KoanRunner(registry, keep_going=True).run(["AboutOutcomes"])
        assert [r.status for r in report.results] == [
            KoanStatus.PASSED,
            KoanStatus.INCOMPLETE,
            KoanStatus.FAILED,
            KoanStatus.ERROR,
        ]
        assert report.results[2].message == "expected 3 but was 2"
        assert report.results[3].message == "ZeroDivisionError: division by zero"
        assert report.first_unsuccessful is report.results[1]

    def test_all_pass(self, registry: SuiteRegistry) -> None:
        """A passing suite reports full progress."""
        report = KoanRunner(registry).run(["AboutPassing"])
        assert report.ok
        assert report.progress == 1.0
        assert report.first_unsuccessful is None

    def test_blank_inside_expression_is_incomplete(self) -> None:
        """A blank compared inside assert_true is incomplete, whichever operator is used."""
        registry = SuiteRegistry()

        @suite(registry=registry)
        class AboutBlankExpressions:
            @koan
            def not_equal(self) -> None:
                assert_true(366 != __)

            @koan
            def equal(self) -> None:
                assert_true(366 == __)

        report = KoanRunner(registry, keep_going=True).run(["AboutBlankExpressions"])
        assert [(r.koan, r.status) for r in report.results] == [
            ("not_equal", KoanStatus.INCOMPLETE),
            ("equal", KoanStatus.INCOMPLETE),
        ]

    def test_on_result_callback(self, registry: SuiteRegistry) -> None:
        """on_result sees every result as it happens."""
        seen: list[KoanResult] = []
        KoanRunner(registry).run(["AboutPassing"], on_result=seen.append)
        assert [r.koan for r in seen] == ["one", "two"]

    def test_unsuccessful_koans_are_logged(
        self, registry: SuiteRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A koan that does not pass is logged at info level."""
        with caplog.at_level(logging.INFO, logger="datekoans.koan.runner"):
            KoanRunner(registry).run(["AboutOutcomes"], koan="fails")
        assert "AboutOutcomes.fails failed" in caplog.text


class TestRunReport:
    """Tests for RunReport arithmetic."""

    def test_empty(self) -> None:
        """An empty run is complete."""
        report = RunReport()
        assert report.ok
        assert report.progress == 1.0
        assert report.summary() == "0/0 koans complete"

    def test_progress(self) -> None:
        """Progress counts passed koans out of the total."""
        report = RunReport(
            results=[KoanResult("A", "x", KoanStatus.PASSED)],
            total=4,
        )
        assert report.progress == 0.25
