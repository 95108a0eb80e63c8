import pytest

from crud.pagination import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    MAX_OFFSET,
    coerce_int,
    resolve_page_request,
    total_pages,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 7),
        ("", 7),
        ("abc", 7),
        ("0", 7),
        ("3", 3),
        (" 12 ", 12),
        ("4abc", 4),
        ("-2", -2),
        ("2.9", 2),
    ],
)
def test_coerce_int(raw, expected):
    assert coerce_int(raw, 7) == expected


def test_resolve_page_request_defaults():
    request = resolve_page_request(None, None)
    assert request.page == 1
    assert request.limit == DEFAULT_LIMIT
    assert request.offset == 0


def test_resolve_page_request_offset():
    request = resolve_page_request("3", "10")
    assert request.offset == 20


def test_resolve_page_request_clamps_out_of_range_values():
    assert resolve_page_request("-5", "-1") == (1, 1)
    assert resolve_page_request("1", "100000").limit == MAX_LIMIT


@pytest.mark.parametrize(
    "total_count, limit, expected",
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (25, 10, 3), (30, 10, 3)],
)
def test_total_pages(total_count, limit, expected):
    assert total_pages(total_count, limit) == expected


def test_coerce_int_overlong_digits_fall_back_to_default():
    assert coerce_int("9" * 5000, 7) == 7


def test_resolve_page_request_keeps_offset_in_64_bit_range():
    request = resolve_page_request("99999999999999999999", "10")
    assert request.offset <= MAX_OFFSET
    assert request.offset > MAX_OFFSET - request.limit

    request = resolve_page_request("99999999999999999999", "1")
    assert request.offset == MAX_OFFSET
