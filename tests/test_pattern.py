"""Tests for bases, patterns and time units."""

import pytest

from milestone import Base, Pattern, TimeUnit
from milestone.util import U64_MAX


def test_pattern_renders_decimal_as_plain_digits():
    """Test decimal rendering."""
    assert str(Pattern(value=10000, base=Base.DECIMAL)) == "10000"


def test_pattern_renders_hex_with_prefix_in_lowercase():
    """Test hexadecimal rendering."""
    assert str(Pattern(value=0xABC, base=Base.HEXADECIMAL)) == "0xabc"


def test_pattern_coerces_integer_base():
    """Test that an integer radix is coerced to Base."""
    pattern = Pattern(value=16, base=16)
    assert pattern.base is Base.HEXADECIMAL


@pytest.mark.parametrize("value", [0, -5, U64_MAX + 1])
def test_pattern_rejects_out_of_range_values(value):
    """Test that values outside 1..U64_MAX are rejected."""
    with pytest.raises(ValueError, match="must be between 1 and"):
        Pattern(value=value, base=Base.DECIMAL)


def test_pattern_rejects_unsupported_base():
    """Test that an unsupported base is rejected."""
    with pytest.raises(ValueError, match="Unsupported base"):
        Pattern(value=7, base=8)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("10", Base.DECIMAL),
        ("dec", Base.DECIMAL),
        ("HEX", Base.HEXADECIMAL),
        ("16", Base.HEXADECIMAL),
        (16, Base.HEXADECIMAL),
    ],
)
def test_base_coerce(text, expected):
    """Test base coercion from names and radixes."""
    assert Base.coerce(text) is expected


def test_time_unit_seconds():
    """Test the fixed length of each unit."""
    assert TimeUnit.SECOND.seconds == 1
    assert TimeUnit.MINUTE.seconds == 60
    assert TimeUnit.HOUR.seconds == 3600
    assert TimeUnit.DAY.seconds == 86400
    assert TimeUnit.WEEK.seconds == 604800
    assert TimeUnit.MONTH.seconds is None


def test_time_unit_coerce_accepts_plurals():
    """Test unit coercion from singular and plural names."""
    assert TimeUnit.coerce("days") is TimeUnit.DAY
    assert TimeUnit.coerce("Month") is TimeUnit.MONTH

    with pytest.raises(ValueError, match="Invalid time unit"):
        TimeUnit.coerce("fortnight")


def test_time_unit_label():
    """Test singular and plural unit labels."""
    assert TimeUnit.DAY.label(1) == "day"
    assert TimeUnit.DAY.label(100) == "days"


def test_time_unit_coerce_rejects_non_strings():
    """Test that non-string units raise ValueError, not AttributeError."""
    with pytest.raises(ValueError, match="Invalid time unit"):
        TimeUnit.coerce(3)
