import math

import pytest

from cdl_fixer.domain.cdl.si_units import SI_PREFIXES, format_si, parse_si


def test_parse_scales_by_prefix():
    assert parse_si("1.2u") == pytest.approx(1.2e-6)
    assert parse_si("4.7k") == pytest.approx(4700.0)
    assert parse_si("-2.5n") == pytest.approx(-2.5e-9)
    assert parse_si("3da") == pytest.approx(30.0)


def test_parse_prefix_is_case_sensitive():
    assert parse_si("1m") == pytest.approx(1e-3)
    assert parse_si("1M") == pytest.approx(1e6)


def test_parse_unknown_suffix_is_unscaled():
    assert parse_si("5x") == 5.0
    assert parse_si("2um") == 2.0
    assert parse_si("12") == 12.0


def test_parse_without_number_is_nan():
    assert math.isnan(parse_si("abc"))
    assert math.isnan(parse_si(""))


def test_prefix_table_has_twenty_entries():
    assert len(SI_PREFIXES) == 20
    assert [u for u, _ in SI_PREFIXES][:3] == ["Y", "Z", "E"]


def test_format_picks_largest_fitting_prefix():
    assert format_si(1.2e-6) == "1.2u"
    assert format_si(1500.0) == "1.5k"
    assert format_si(15.0) == "1.5da"
    assert format_si(1.5) == "15d"
    assert format_si(-2e-9) == "-2n"


def test_format_canonicalizes_parsed_literal():
    assert format_si(parse_si("1200n")) == "1.2u"


def test_format_without_prefix_below_yocto():
    assert format_si(0.0) == "0"
    assert format_si(5e-30) == "5e-30"
    assert format_si(-1e-25) == "-1e-25"


def test_format_infinity_does_not_raise():
    assert format_si(math.inf) == "infY"
    assert format_si(-math.inf) == "-infY"


def test_format_respects_max_len():
    assert format_si(123456789.0, max_len=4) == "123"


@pytest.mark.parametrize("value", [1.23e-20, 4.56e-12, 7.89e-3, 1.0, 42.0, 3.3e5, 9.99e23, -6.5e-7])
def test_parse_format_stays_within_rounding(value):
    assert parse_si(format_si(value)) == pytest.approx(value, rel=1e-5)
