import pytest

from iso6709parse.errors import ParseError
from iso6709parse.longitude import (
    parse_east_or_west,
    parse_readable_longitude,
    parse_string_longitude,
)


def approx(value):
    return pytest.approx(value, abs=1e-4)


# Readable format

@pytest.mark.parametrize(
    "text, expected",
    [
        ("95°48′26.533″W 123.45m", -95.80737),
        ("95°48′26.533″E 123.45m", 95.80737),
        ("95°48'26.533″W 123.45m", -95.80737),
        ('95°48′26.533"W 123.45m', -95.80737),
        ("180°00′0″W 123.45m", -180.0),
        ("180°00′0″E 123.45m", 180.0),
    ],
)
def test_readable_longitude_values(text, expected):
    _, value = parse_readable_longitude(text)
    assert value == approx(expected)


def test_readable_longitude_remaining():
    rest, _ = parse_readable_longitude("95°48′26.533″W 123.45m")
    assert rest == " 123.45m"


@pytest.mark.parametrize(
    "text",
    [
        "95.48′26.533″W 123.45m",
        "95°48.26.533″W 123.45m",
        "95°48′26.533.W 123.45m",
        "180°′1.″W 123.45m",
        "180°′1.″E 123.45m",
        "95.48′26.533″ 123.45m",
    ],
)
def test_readable_longitude_errors(text):
    with pytest.raises(ParseError):
        parse_readable_longitude(text)


def test_readable_longitude_over_limit_is_fatal():
    with pytest.raises(ParseError) as info:
        parse_readable_longitude("180°00′01″E")
    assert info.value.fatal is True


# String representation

@pytest.mark.parametrize(
    "text, expected",
    [
        ("E", ("", 1.0)),
        ("+", ("", 1.0)),
        ("W", ("", -1.0)),
        ("-", ("", -1.0)),
        ("-123.123", ("123.123", -1.0)),
    ],
)
def test_parse_direction(text, expected):
    assert parse_east_or_west(text) == expected


def test_parse_direction_rejects_latitude_letter():
    with pytest.raises(ParseError):
        parse_east_or_west("N")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("+145.45", 145.45),
        ("E145.45", 145.45),
        ("-145.45", -145.45),
        ("W145.45", -145.45),
        ("W145", -145.0),
        ("W145.1234", -145.1234),
        ("W045.45", -45.45),
        ("+005.45", 5.45),
        ("+005.05", 5.05),
        ("+180.0", 180.0),
        ("E180", 180.0),
        ("W180", -180.0),
        ("-180.0", -180.0),
    ],
)
def test_string_ddd_ddd(text, expected):
    assert parse_string_longitude(text) == ("", expected)


@pytest.mark.parametrize(
    "text",
    ["45.45", "w45.45", "+5.45", "West45.45", "145.45", "N129.45", "+180.1", "-180.1"],
)
def test_string_ddd_ddd_errors(text):
    with pytest.raises(ParseError):
        parse_string_longitude(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("+14520.30", 145.338333),
        ("W14520.30", -145.338333),
        ("W14520.12304", -145.335384),
        ("W14520", -145.33333),
        ("W14500", -145.0),
    ],
)
def test_string_dddmm_mmm(text, expected):
    rest, value = parse_string_longitude(text)
    assert rest == ""
    assert value == approx(expected)


@pytest.mark.parametrize(
    "text", ["4545.45", "N4560.45", "N4560", "N4590.45", "N45a5.45"]
)
def test_string_dddmm_mmm_errors(text):
    with pytest.raises(ParseError):
        parse_string_longitude(text)


def test_string_minutes_out_of_range_is_fatal():
    with pytest.raises(ParseError) as info:
        parse_string_longitude("E14560.5")
    assert info.value.fatal is True


@pytest.mark.parametrize(
    "text, expected",
    [
        ("+1452018", 145.338333),
        ("W1452018", -145.338333),
        ("W1452000", -145.33333),
        ("W1450000", -145.0),
        ("W1452035.1528", -145.343098),
    ],
)
def test_string_dddmmss_sss(text, expected):
    rest, value = parse_string_longitude(text)
    assert rest == ""
    assert value == approx(expected)


def test_string_longitude_leaves_altitude():
    assert parse_string_longitude("W170.10+8712CRSWGS_85/") == ("+8712CRSWGS_85/", -170.1)


def test_string_longitude_over_limit_reports_after_sign():
    with pytest.raises(ParseError) as info:
        parse_string_longitude("-180.1")
    assert info.value.remaining == "180.1"
    assert info.value.fatal is True