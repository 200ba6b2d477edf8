import math

import pytest

from siglon.events.utils import parse_coordinates, derive_province


def test_parse_coordinates_lat_lng_order():
    assert parse_coordinates("-6.59, 106.8") == (-6.59, 106.8)
    assert parse_coordinates("  -7.4 ,109.69 ") == (-7.4, 109.69)


@pytest.mark.parametrize(
    "text",
    ["", "-6.59 106.8", "abc, 106.8", "-6.59, east", "1, 2, 3", "nan, 106.8", "-6.59, inf", ","],
)
def test_parse_coordinates_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_coordinates(text)


def test_derive_province_uses_text_after_last_comma():
    assert derive_province("Kab. Bogor, Jawa Barat") == "Jawa Barat"
    assert derive_province("Desa X, Kec. Y, Sulawesi Selatan") == "Sulawesi Selatan"


def test_derive_province_defaults():
    assert derive_province("Lereng Merapi") == "N/A"
    assert derive_province("Kab. Bogor, ") == "N/A"
    assert derive_province("") == "N/A"
