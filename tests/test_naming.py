import re

import pytest
from pydantic import ValidationError

from random_names.core import Generator, InvalidConfigError, Naming, NamingStrategy, Separator
from random_names.core.naming import generate_number, generate_padded_number

from .conftest import FixedRandom


class NoRandom:
    """A random source that must not be touched."""

    def choice(self, seq):
        raise AssertionError("choice() should not be called")

    def randint(self, a, b):
        raise AssertionError("randint() should not be called")


class TestNumberDraws:
    """Test the numeric suffix draws."""

    def test_draw_has_exact_digit_count(self, rng):
        for _ in range(1000):
            assert 1000 <= generate_number(4, rng) <= 9999

    def test_single_digit_draw_skips_zero(self, rng):
        draws = {generate_number(1, rng) for _ in range(500)}
        assert draws <= set(range(1, 10))
        assert 0 not in draws

    def test_draw_bounds_passed_to_rng(self):
        assert generate_number(3, FixedRandom()) == 100

    def test_zero_digits_fails_fast(self, rng):
        with pytest.raises(ValueError):
            generate_number(0, rng)

    def test_padded_rendering(self):
        assert generate_padded_number(3, FixedRandom(number=7)) == "007"
        assert generate_padded_number(2, FixedRandom()) == "10"


class TestNamingApply:
    """Test appending the suffix to a combined name."""

    def test_plain_returns_input_without_drawing(self):
        assert Naming.plain().apply("quiet-river", NoRandom()) == "quiet-river"

    def test_numbered_four_digits(self, rng):
        naming = Naming.numbered(4, Separator.dash())
        pattern = re.compile(r"^quiet-river-[1-9][0-9]{3}$")

        for _ in range(10_000):
            name = naming.apply("quiet-river", rng)
            assert pattern.match(name), f"'{name}' doesn't have a 4 digit suffix"

    def test_zero_padded_two_digits(self, rng):
        naming = Naming.zero_padded(2, Separator.underscore())
        pattern = re.compile(r"^quiet-river_[0-9]{2}$")

        for _ in range(10_000):
            name = naming.apply("quiet-river", rng)
            assert pattern.match(name), f"'{name}' doesn't have a 2 character suffix"

    def test_zero_padded_keeps_leading_zeros(self):
        naming = Naming.zero_padded(2, Separator.underscore())
        assert naming.apply("quiet-river", FixedRandom(number=5)) == "quiet-river_05"

    def test_custom_and_empty_separators(self):
        assert Naming.numbered(2, Separator.custom("#")).apply("x", FixedRandom()) == "x#10"
        assert Naming.numbered(2, Separator.none()).apply("x", FixedRandom()) == "x10"


class TestNamingModel:
    """Test naming validation and wire format."""

    def test_default_is_plain(self):
        assert Naming() == Naming.plain()

    def test_numbered_defaults_to_dash(self):
        assert Naming.numbered(3).separator == Separator.dash()

    def test_zero_digits_rejected(self):
        with pytest.raises(ValidationError):
            Naming.numbered(0)

    def test_numbered_requires_digits(self):
        with pytest.raises(ValidationError):
            Naming(strategy=NamingStrategy.NUMBERED)

    def test_plain_rejects_digits(self):
        with pytest.raises(ValidationError):
            Naming(strategy=NamingStrategy.PLAIN, digits=3)

    def test_serializes_tagged(self):
        assert Naming.plain().model_dump() == "Plain"
        assert Naming.numbered(4).model_dump() == {"Numbered": [4, "-"]}
        assert Naming.zero_padded(2, Separator.underscore()).model_dump() == {"ZeroPaddedNumbered": [2, "_"]}

    def test_parses_tagged(self):
        assert Naming.model_validate("Plain") == Naming.plain()
        assert Naming.model_validate({"ZeroPaddedNumbered": [2, "_"]}) == Naming.zero_padded(2, Separator.underscore())

    def test_rejects_malformed_tagged_value(self):
        with pytest.raises(ValidationError):
            Naming.model_validate({"Numbered": 4})

    def test_rejects_null_tagged_separator(self):
        with pytest.raises(ValidationError):
            Naming.model_validate({"Numbered": [4, None]})
        with pytest.raises(ValidationError):
            Naming.model_validate({"ZeroPaddedNumbered": [2, None]})

    def test_null_separator_in_config_is_invalid(self):
        with pytest.raises(InvalidConfigError):
            Generator.from_dict({"adjectives": ["a"], "nouns": ["b"], "naming": {"Numbered": [4, None]}})

    def test_field_form_without_separator_defaults_to_dash(self):
        naming = Naming(strategy=NamingStrategy.NUMBERED, digits=2, separator=None)
        assert naming.separator == Separator.dash()
        assert naming.model_dump() == {"Numbered": [2, "-"]}
