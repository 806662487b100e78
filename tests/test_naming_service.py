import pytest

from adgen.services.naming_service import (
    NamingService,
    extract_variables,
    interpolate_pattern,
    missing_variables,
    to_display_string,
)


def test_replaces_single_variable():
    assert interpolate_pattern("{brand}", {"brand": "Nike"}) == "Nike"


def test_replaces_multiple_variables():
    row = {"brand": "Nike", "category": "Shoes"}
    assert interpolate_pattern("{brand} - {category}", row) == "Nike - Shoes"


def test_missing_variable_keeps_placeholder():
    assert interpolate_pattern("{brand} - {missing}", {"brand": "Nike"}) == "Nike - {missing}"


def test_null_value_becomes_empty_string():
    assert interpolate_pattern("{brand}|{category}", {"brand": "Nike", "category": None}) == "Nike|"


def test_empty_string_value():
    assert interpolate_pattern("[{brand}]", {"brand": ""}) == "[]"


@pytest.mark.parametrize(
    "value, expected",
    [(99.99, "99.99"), (35, "35"), (5.0, "5"), (0, "0"), (-2.5, "-2.5"), (True, "true")],
)
def test_numbers_render_as_plain_decimals(value, expected):
    assert interpolate_pattern("{price}", {"price": value}) == expected


def test_pattern_without_tokens_is_unchanged():
    assert interpolate_pattern("Static Campaign", {"brand": "Nike"}) == "Static Campaign"


@pytest.mark.parametrize("values", [{}, {"brand": "Nike"}, {"a": None}])
def test_empty_pattern_returns_empty_string(values):
    assert interpolate_pattern("", values) == ""
    assert interpolate_pattern(None, values) == ""


def test_lookup_is_case_sensitive():
    row = {"Brand": "Upper", "brand": "lower"}
    assert interpolate_pattern("{Brand}/{brand}", row) == "Upper/lower"
    assert interpolate_pattern("{BRAND}", row) == "{BRAND}"


def test_special_characters_pass_through():
    row = {"offer": "50% off & free shipping!"}
    assert interpolate_pattern("Deal: {offer}", row) == "Deal: 50% off & free shipping!"


def test_underscores_and_digits_in_names():
    row = {"product_name": "Air Max", "size_2": "XL", "9lives": "cat"}
    assert interpolate_pattern("{product_name} {size_2} {9lives}", row) == "Air Max XL cat"


def test_substituted_values_are_not_rescanned():
    row = {"a": "{b}", "b": "nested"}
    assert interpolate_pattern("{a}", row) == "{b}"


def test_non_identifier_braces_are_left_alone():
    assert interpolate_pattern("{not valid} {}", {"not valid": "x"}) == "{not valid} {}"


def test_all_known_keys_leave_no_braces():
    row = {"brand": "Nike", "category": "Shoes", "price": 10}
    result = interpolate_pattern("{brand}: {category} at {price} ({brand})", row)
    assert "{" not in result and "}" not in result


def test_to_display_string():
    assert to_display_string(None) == ""
    assert to_display_string("text") == "text"
    assert to_display_string(False) == "false"


@pytest.mark.parametrize(
    "value, expected",
    [
        (5.0, "5"),
        (99.99, "99.99"),
        (-2.5, "-2.5"),
        (0.00001, "0.00001"),
        (0.0000015, "0.0000015"),
        (1e-7, "1e-7"),
        (-2.5e-8, "-2.5e-8"),
        (1e16, "10000000000000000"),
        (1e21, "1e+21"),
        (1.5e22, "1.5e+22"),
        (float("inf"), "Infinity"),
        (float("nan"), "NaN"),
    ],
)
def test_floats_render_like_wizard_numbers(value, expected):
    assert to_display_string(value) == expected


def test_small_float_in_pattern():
    assert interpolate_pattern("{v}", {"v": 1e-7}) == "1e-7"


def test_extract_and_missing_variables():
    pattern = "{brand} {category} {brand} {size}"
    assert extract_variables(pattern) == ["brand", "category", "size"]
    assert missing_variables(pattern, {"brand": "Nike", "category": None}) == ["size"]
    assert extract_variables("") == []


def test_campaign_name_is_trimmed():
    assert NamingService.campaign_name("  {brand}  ", {"brand": "Nike"}) == "Nike"
    assert NamingService.campaign_name("{brand}", {"brand": "   "}) == ""


def test_optional_text_is_none_for_unset_fields():
    assert NamingService.optional_text(None, {"brand": "Nike"}) is None
    assert NamingService.optional_text("", {"brand": "Nike"}) is None
    assert NamingService.optional_text("Shop {brand}", {"brand": "Nike"}) == "Shop Nike"
