"""Tests for scalar evaluation into base-unit quantities."""

from datetime import timedelta

import pytest

from toscatypes.domain.errors import UnresolvedUnitError
from toscatypes.domain.quantities import Duration, Frequency, Size, evaluate
from toscatypes.domain.units import UnitCategory


class TestEvaluate:
    @pytest.mark.parametrize(
        "literal,unit,expected",
        [
            (10, "GB", Size(bytes=10_000_000_000)),
            (1, "GiB", Size(bytes=1_073_741_824)),
            (1, "KiB", Size(bytes=1024)),
            (0.5, "kB", Size(bytes=500)),
            (3, "B", Size(bytes=3)),
        ],
    )
    def test_size(self, literal: float, unit: str, expected: Size) -> None:
        assert evaluate(literal, unit, UnitCategory.SIZE) == expected

    @pytest.mark.parametrize(
        "literal,unit,expected",
        [
            (2.5, "GHz", Frequency(hertz=2_500_000_000)),
            (100, "MHz", Frequency(hertz=100_000_000)),
            (44.1, "kHz", Frequency(hertz=pytest.approx(44_100))),
            (60, "Hz", Frequency(hertz=60)),
        ],
    )
    def test_frequency(self, literal: float, unit: str, expected: Frequency) -> None:
        assert evaluate(literal, unit, UnitCategory.FREQUENCY).hertz == expected.hertz

    @pytest.mark.parametrize(
        "literal,unit,ticks",
        [
            (500, "ms", 500_000_000),
            (1, "d", 86_400_000_000_000),
            (1.5, "h", 5_400_000_000_000),
            (2, "m", 120_000_000_000),
            (30, "s", 30_000_000_000),
            (250, "us", 250_000),
            (7, "ns", 7),
            (0.5, "s", 500_000_000),
        ],
    )
    def test_duration(self, literal: float, unit: str, ticks: int) -> None:
        result = evaluate(literal, unit, UnitCategory.DURATION)
        assert result == Duration(ticks=ticks)
        assert isinstance(result.ticks, int)

    def test_fractional_nanoseconds_round(self) -> None:
        assert evaluate(1.6, "ns", UnitCategory.DURATION) == Duration(ticks=2)
        assert evaluate(1.4, "ns", UnitCategory.DURATION) == Duration(ticks=1)

    def test_negative_magnitude(self) -> None:
        assert evaluate(-1, "s", UnitCategory.DURATION) == Duration(ticks=-1_000_000_000)
        assert evaluate(-2, "kB", UnitCategory.SIZE) == Size(bytes=-2000)

    def test_unit_from_other_category_is_unresolved(self) -> None:
        with pytest.raises(UnresolvedUnitError) as exc_info:
            evaluate(1, "GB", UnitCategory.DURATION)
        assert exc_info.value.value == "GB"

    def test_pure(self) -> None:
        first = evaluate(10, "GB", UnitCategory.SIZE)
        second = evaluate(10, "GB", UnitCategory.SIZE)
        assert first == second


class TestQuantityTypes:
    def test_categories(self) -> None:
        assert Size.category is UnitCategory.SIZE
        assert Frequency.category is UnitCategory.FREQUENCY
        assert Duration.category is UnitCategory.DURATION

    def test_value_property(self) -> None:
        assert Size(bytes=1024).value == 1024
        assert Frequency(hertz=60).value == 60
        assert Duration(ticks=5).value == 5

    def test_frozen(self) -> None:
        size = Size(bytes=1)
        with pytest.raises(AttributeError):
            size.bytes = 2  # type: ignore[misc]


class TestDurationTimedelta:
    def test_whole_units(self) -> None:
        assert Duration(ticks=30_000_000_000).to_timedelta() == timedelta(seconds=30)
        assert Duration(ticks=86_400_000_000_000).to_timedelta() == timedelta(days=1)

    def test_sub_microsecond_truncated(self) -> None:
        assert Duration(ticks=1_999).to_timedelta() == timedelta(microseconds=1)
        assert Duration(ticks=999).to_timedelta() == timedelta(0)

    def test_negative_truncates_toward_zero(self) -> None:
        assert Duration(ticks=-1_999).to_timedelta() == timedelta(microseconds=-1)

    def test_beyond_timedelta_range(self) -> None:
        ticks = 10_000_000_000 * 86_400_000_000_000
        with pytest.raises(OverflowError):
            Duration(ticks=ticks).to_timedelta()
