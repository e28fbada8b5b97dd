import pytest

from airmirror.pin import create_pin_display


def _rows(image):
    parts = image.split("\n")
    return parts[1:9]


def test_framing_newlines():
    image = create_pin_display("1234", 10, 3)
    assert image.startswith("\n")
    assert image.endswith("\n\n")
    assert image.count("\n") == 10


def test_row_lengths_and_margin():
    margin, gap = 4, 2
    image = create_pin_display("5678", margin, gap)
    rows = _rows(image)
    assert len(rows) == 8
    for row in rows:
        assert len(row) == margin + 4 * (10 + gap)
        assert row[:margin] == " " * margin
        assert row.endswith(" " * gap)


def test_only_known_pixels_used():
    image = create_pin_display("0123456789", 0, 0)
    assert set(image) <= set(' 8dbPYo".\n')


def test_digit_seven_top_row():
    rows = _rows(create_pin_display("7", 0, 0))
    assert rows[0] == "8888888888"


def test_digits_concatenate():
    left = _rows(create_pin_display("4", 0, 1))
    right = _rows(create_pin_display("9", 0, 1))
    both = _rows(create_pin_display("49", 0, 1))
    assert both == [a + b for a, b in zip(left, right)]


def test_margin_prefixes_plain_render():
    plain = _rows(create_pin_display("2580", 0, 3))
    shifted = _rows(create_pin_display("2580", 6, 3))
    assert shifted == ["      " + row for row in plain]


def test_distinct_digits_render_differently():
    renders = {tuple(_rows(create_pin_display(str(d), 0, 0))) for d in range(10)}
    assert len(renders) == 10


@pytest.mark.parametrize("bad", ["12a4", "-123", "12 3", "0x12"])
def test_non_digit_pin_rejected(bad):
    with pytest.raises(ValueError):
        create_pin_display(bad, 10, 3)