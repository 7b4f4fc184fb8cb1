import pytest

from birdsql.dialects import INTERVAL_UNITS, FirebirdExpressions, IntervalUnit
from birdsql.errors import ArityError, UnknownIntervalUnitError


@pytest.fixture
def expr():
    return FirebirdExpressions()


def test_length_and_ceil(expr):
    assert expr.length("name") == "CHAR_LENGTH(name)"
    assert expr.ceil("price") == "CEILING( price )"


def test_now(expr):
    assert expr.now() == "CAST('NOW' as timestamp)"


def test_concat(expr):
    assert expr.concat("a", "b", "c") == "a || b || c"
    assert expr.concat("a") == "a"
    assert expr.concat(["a", "b"], "c") == "a || b || c"


def test_concat_without_arguments_raises(expr):
    with pytest.raises(ArityError) as excinfo:
        expr.concat()
    assert excinfo.value.function == "concat"
    assert excinfo.value.got == 0
    assert excinfo.value.minimum == 1


def test_position_forms(expr):
    assert expr.position("foo", "title") == "position( 'foo' in title )"
    assert expr.position("foo", "title", 0) == "position( 'foo' in title )"
    assert expr.position("foo", "title", 3) == "position( 'foo' in title, 3 )"


def test_position_escapes_quotes(expr):
    assert expr.position("it's", "title") == "position( 'it''s' in title )"


def test_unix_timestamp(expr):
    assert (
        expr.unix_timestamp("created")
        == "DATEDIFF(second, timestamp '1970-01-01 00:00:00', created)"
    )


def test_date_add_and_sub_are_mirrored(expr):
    added = expr.date_add("created", 5, "DAY")
    subtracted = expr.date_sub("created", 5, "DAY")
    assert added == "DATEADD ( Day, +5, created )"
    assert subtracted == "DATEADD ( Day, -5, created )"
    assert added.replace("+", "-") == subtracted


def test_units_accept_enum_and_lowercase_names(expr):
    assert expr.date_add("c", 1, IntervalUnit.HOUR) == "DATEADD ( Hour, +1, c )"
    assert expr.date_add("c", 1, "minute") == "DATEADD ( minute, +1, c )"


@pytest.mark.parametrize("unit", ["WEEK", "", "days", 5])
def test_unknown_unit_raises(expr, unit):
    with pytest.raises(UnknownIntervalUnitError):
        expr.date_add("created", 5, unit)
    with pytest.raises(UnknownIntervalUnitError):
        expr.date_sub("created", 5, unit)
    with pytest.raises(UnknownIntervalUnitError):
        expr.date_extract("created", unit)


def test_date_extract_pads_to_two_characters(expr):
    assert expr.date_extract("created", "HOUR") == "LPAD( EXTRACT( Hour FROM created ), 2,' ' )"


def test_interval_table_covers_every_unit_and_is_read_only():
    assert set(INTERVAL_UNITS) == set(IntervalUnit)
    with pytest.raises(TypeError):
        INTERVAL_UNITS[IntervalUnit.DAY] = "day"  # type: ignore[index]


def test_negative_amounts_keep_a_single_sign(expr):
    assert expr.date_add("created", -5, "DAY") == "DATEADD ( Day, +(-5), created )"
    assert expr.date_sub("created", -5, "DAY") == "DATEADD ( Day, -(-5), created )"
    assert "--" not in expr.date_sub("created", "-2", IntervalUnit.MONTH)
