import pytest

from dining.parsing import (
    InputError,
    Settings,
    contains_only_digits,
    integer_atoi,
    parse_settings,
    usage,
    validate_arguments,
)


@pytest.mark.parametrize("text", ["0", "123", "2147483647", ""])
def test_contains_only_digits_true(text):
    assert contains_only_digits(text) is True


@pytest.mark.parametrize("text", ["-1", "+5", "12a", " 3", "1.5"])
def test_contains_only_digits_false(text):
    assert contains_only_digits(text) is False


def test_integer_atoi_int_max():
    assert integer_atoi("2147483647") == 2147483647


def test_integer_atoi_overflow():
    assert integer_atoi("2147483648") == -1
    assert integer_atoi("99999999999999") == -1


def test_integer_atoi_stops_at_non_digit():
    assert integer_atoi("42abc") == 42
    assert integer_atoi("") == 0


def test_validate_accepts_good_input():
    validate_arguments(["5", "800", "200", "200"])
    validate_arguments(["250", "0", "0", "0", "0"])
    assert parse_settings(["250", "0", "0", "0"]).nb_philos == 250


@pytest.mark.parametrize("count", ["0", "251", ""])
def test_validate_rejects_philosopher_count(count):
    with pytest.raises(InputError) as info:
        validate_arguments([count, "800", "200", "200"])
    assert "250" in str(info.value)
    assert str(info.value).startswith("philo:")


def test_validate_rejects_non_digit():
    with pytest.raises(InputError) as info:
        validate_arguments(["5", "abc", "200", "200"])
    assert "abc" in str(info.value)


def test_validate_rejects_overflow():
    with pytest.raises(InputError) as info:
        validate_arguments(["5", "800", "2147483648", "200"])
    assert "2147483648" in str(info.value)


def test_parse_settings_defaults_must_eat():
    assert parse_settings(["5", "800", "200", "200"]) == Settings(5, 800, 200, 200, -1)


def test_parse_settings_with_must_eat():
    settings = parse_settings(["4", "410", "200", "100", "7"])
    assert settings == Settings(4, 410, 200, 100, 7)


@pytest.mark.parametrize(
    "args", [[], ["5", "800", "200"], ["1", "2", "3", "4", "5", "6"]]
)
def test_parse_settings_wrong_count(args):
    with pytest.raises(InputError) as info:
        parse_settings(args)
    assert str(info.value) == usage()


def test_usage_mentions_arguments():
    text = usage()
    assert text.startswith("philo: usage: ./philo")
    assert "[number_of_times_each_philosopher_must_eat]" in text