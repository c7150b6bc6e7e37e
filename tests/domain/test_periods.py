"""Tests for period validation and filtering."""

import time
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from src.domain.exceptions import ValidationError
from src.domain.models.ledger import LedgerEvent, LedgerEventKind, PeriodMode
from src.domain.services.ledger import compute_running_balances
from src.domain.services.periods import build_period_selector, filter_by_period


def _annotated(*moments: datetime):
    events = [
        LedgerEvent(
            id=f"e{index}",
            kind=LedgerEventKind.INCOME,
            amount=Decimal("10"),
            occurred_at=moment,
            title=f"Event {index}",
        )
        for index, moment in enumerate(moments)
    ]
    return compute_running_balances(events)


def test_monthly_selector_uses_zero_based_month() -> None:
    """Month 0 should mean January."""
    selector = build_period_selector("monthly", 2024, 0)

    assert selector.mode == PeriodMode.MONTHLY
    assert selector.label == "January 2024"
    assert selector.bounds() == (
        datetime(2024, 1, 1, tzinfo=timezone.utc),
        datetime(2024, 2, 1, tzinfo=timezone.utc),
    )


def test_december_window_ends_next_year() -> None:
    """Month 11 should close at the start of the next year."""
    selector = build_period_selector(PeriodMode.MONTHLY, "2023", "11")

    assert selector.label == "December 2023"
    assert selector.bounds()[1] == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_yearly_selector_ignores_month() -> None:
    """Yearly mode should drop any month supplied by the caller."""
    selector = build_period_selector("Yearly", 2024, 5)

    assert selector.mode == PeriodMode.YEARLY
    assert selector.month is None
    assert selector.label == "2024"


@pytest.mark.parametrize(
    ("mode", "year", "month"),
    [
        (None, 2024, 0),
        ("monthly", None, 0),
        ("monthly", "", 0),
        ("weekly", 2024, 0),
        ("monthly", "twenty", 0),
        ("monthly", 1969, 0),
        ("yearly", 2101, None),
        ("monthly", 2024, None),
        ("monthly", 2024, 12),
        ("monthly", 2024, -1),
        ("monthly", True, 0),
    ],
)
def test_invalid_period_parameters_are_rejected(mode, year, month) -> None:
    """Bad period parameters should raise a validation error."""
    with pytest.raises(ValidationError):
        build_period_selector(mode, year, month)


def test_filter_keeps_input_order_and_balances() -> None:
    """Filtering should neither reorder nor touch running balances."""
    annotated = _annotated(
        datetime(2023, 12, 31, 23, 59, tzinfo=timezone.utc),
        datetime(2024, 1, 1, tzinfo=timezone.utc),
        datetime(2024, 1, 31, 23, 59, tzinfo=timezone.utc),
        datetime(2024, 2, 1, tzinfo=timezone.utc),
    )
    selector = build_period_selector("monthly", 2024, 0)

    filtered = filter_by_period(annotated, selector)

    assert [item.id for item in filtered] == ["e1", "e2"]
    assert [item.running_balance for item in filtered] == [
        Decimal("20"),
        Decimal("30"),
    ]


def test_filter_uses_utc_date() -> None:
    """A late-evening local time that is already next month in UTC moves."""
    kathmandu = timezone(timedelta(hours=5, minutes=45))
    annotated = _annotated(
        datetime(2024, 2, 1, 3, 0, tzinfo=kathmandu),
        datetime(2024, 1, 31, 20, 0, tzinfo=timezone(timedelta(hours=-5))),
    )

    january = filter_by_period(
        annotated,
        build_period_selector("monthly", 2024, 0),
    )
    february = filter_by_period(
        annotated,
        build_period_selector("monthly", 2024, 1),
    )

    assert [item.id for item in january] == ["e0"]
    assert [item.id for item in february] == ["e1"]


def test_yearly_filter_covers_whole_year() -> None:
    """A yearly window should keep every month of that year."""
    annotated = _annotated(
        datetime(2024, 1, 1, tzinfo=timezone.utc),
        datetime(2024, 12, 31, 23, 59, tzinfo=timezone.utc),
        datetime(2025, 1, 1, tzinfo=timezone.utc),
    )

    filtered = filter_by_period(annotated, build_period_selector("yearly", 2024))

    assert [item.id for item in filtered] == ["e0", "e1"]


def test_filter_of_empty_history_is_empty() -> None:
    """Filtering nothing should return nothing."""
    selector = build_period_selector("yearly", 2024)

    assert filter_by_period([], selector) == []


def test_yearly_filter_is_union_of_monthly_filters() -> None:
    """The twelve monthly windows should partition the yearly window."""
    annotated = _annotated(
        *(
            datetime(2024, month, day, tzinfo=timezone.utc)
            for month in range(1, 13)
            for day in (1, 28)
        ),
        datetime(2023, 12, 31, tzinfo=timezone.utc),
        datetime(2025, 1, 1, tzinfo=timezone.utc),
    )

    yearly = filter_by_period(annotated, build_period_selector("yearly", 2024))
    monthly = [
        item
        for month in range(12)
        for item in filter_by_period(
            annotated,
            build_period_selector("monthly", 2024, month),
        )
    ]

    assert len(yearly) == 24
    assert monthly == yearly


@pytest.fixture
def kathmandu_host_time(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "Asia/Kathmandu")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_naive_timestamps_are_read_as_utc(kathmandu_host_time) -> None:
    """Naive datetimes should land in their UTC month, not the host's."""
    annotated = _annotated(
        datetime(2024, 2, 1, 3, 0),
        datetime(2024, 1, 31, 23, 30),
    )

    january = filter_by_period(
        annotated,
        build_period_selector("monthly", 2024, 0),
    )
    february = filter_by_period(
        annotated,
        build_period_selector("monthly", 2024, 1),
    )

    assert [item.id for item in january] == ["e1"]
    assert [item.id for item in february] == ["e0"]
