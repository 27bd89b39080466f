"""Tests for the unit vocabulary and the unit classifier."""

import pytest

from toscatypes.domain.units import (
    BASE_UNITS,
    DURATION_FACTORS,
    FREQUENCY_FACTORS,
    SIZE_FACTORS,
    UNIT_CATEGORIES,
    UNIT_FACTORS,
    UnitCategory,
    _build_unit_index,
    base_unit,
    classify,
    conversion_factor,
    units_for,
)

VOCABULARY = {
    UnitCategory.SIZE: {"B", "kB", "KiB", "MB", "MiB", "GB", "GiB", "TB", "TiB"},
    UnitCategory.FREQUENCY: {"Hz", "kHz", "MHz", "GHz"},
    UnitCategory.DURATION: {"d", "h", "m", "s", "ms", "us", "ns"},
}


class TestUnitCategory:
    def test_members(self) -> None:
        assert {c.value for c in UnitCategory} == {"size", "frequency", "duration"}

    def test_str_enum(self) -> None:
        assert UnitCategory.SIZE == "size"
        assert str(UnitCategory.DURATION) == "duration"


class TestVocabulary:
    @pytest.mark.parametrize("category", list(UnitCategory), ids=str)
    def test_category_units(self, category: UnitCategory) -> None:
        assert set(units_for(category)) == VOCABULARY[category]

    def test_every_unit_in_exactly_one_category(self) -> None:
        for unit in UNIT_CATEGORIES:
            owners = [c for c, factors in UNIT_FACTORS.items() if unit in factors]
            assert len(owners) == 1, unit

    def test_index_covers_all_tables(self) -> None:
        total = len(SIZE_FACTORS) + len(FREQUENCY_FACTORS) + len(DURATION_FACTORS)
        assert len(UNIT_CATEGORIES) == total

    def test_overlapping_tables_rejected(self) -> None:
        with pytest.raises(ValueError, match="claimed by both"):
            _build_unit_index(
                {
                    UnitCategory.SIZE: {"B": 1.0},
                    UnitCategory.FREQUENCY: {"B": 1.0},
                }
            )

    def test_base_units(self) -> None:
        assert BASE_UNITS == {
            UnitCategory.SIZE: "B",
            UnitCategory.FREQUENCY: "Hz",
            UnitCategory.DURATION: "ns",
        }
        for category in UnitCategory:
            assert conversion_factor(base_unit(category), category) == 1


class TestClassify:
    @pytest.mark.parametrize(
        "unit,category",
        [(u, c) for c, units in VOCABULARY.items() for u in sorted(units)],
    )
    def test_known_units(self, unit: str, category: UnitCategory) -> None:
        assert classify(unit) is category

    @pytest.mark.parametrize(
        "unit",
        [
            "kb",  # wrong case
            "KB",
            "gib",
            "hz",
            "D",
            "MS",
            "Ms",
            "lightyears",
            "",
            "kBB",  # contains a unit
            "xB",
            "msx",
            "B ",
        ],
    )
    def test_unknown_units(self, unit: str) -> None:
        assert classify(unit) is None

    def test_short_unit_not_matched_inside_longer_token(self) -> None:
        """'B' and 'm' are substrings of other units but classify exactly."""
        assert classify("kB") is UnitCategory.SIZE
        assert classify("ms") is UnitCategory.DURATION
        assert classify("MHz") is UnitCategory.FREQUENCY


class TestConversionFactors:
    @pytest.mark.parametrize(
        "unit,factor",
        [
            ("B", 1),
            ("kB", 1000),
            ("KiB", 1024),
            ("MB", 1000**2),
            ("MiB", 1024**2),
            ("GB", 1000**3),
            ("GiB", 1024**3),
            ("TB", 1000**4),
            ("TiB", 1024**4),
        ],
    )
    def test_size_factors(self, unit: str, factor: int) -> None:
        assert conversion_factor(unit, UnitCategory.SIZE) == factor

    @pytest.mark.parametrize(
        "unit,factor",
        [("Hz", 1), ("kHz", 10**3), ("MHz", 10**6), ("GHz", 10**9)],
    )
    def test_frequency_factors(self, unit: str, factor: int) -> None:
        assert conversion_factor(unit, UnitCategory.FREQUENCY) == factor

    def test_duration_factors_are_integer_ratios(self) -> None:
        chain = ["d", "h", "m", "s", "ms", "us", "ns"]
        ratios = [DURATION_FACTORS[a] // DURATION_FACTORS[b] for a, b in zip(chain, chain[1:])]
        assert ratios == [24, 60, 60, 1000, 1000, 1000]
        assert all(isinstance(f, int) for f in DURATION_FACTORS.values())
        assert DURATION_FACTORS["ns"] == 1

    def test_lookup_is_scoped_to_category(self) -> None:
        assert conversion_factor("GB", UnitCategory.FREQUENCY) is None
        assert conversion_factor("ms", UnitCategory.SIZE) is None
