import random

import pytest

from random_names.core import (
    ADJECTIVES,
    NOUNS,
    AdjectivesEmptyError,
    Casing,
    ConfigurationError,
    GeneratorBuilder,
    InvalidConfigError,
    Length,
    Naming,
    NounsEmptyError,
    UninitializedFieldError,
)
from random_names.core import generator as generator_module
from random_names.core.generator import DEFAULT_MAX_REROLLS


class TestGeneratorBuilder:
    """Test building and validating generators."""

    def test_defaults(self):
        generator = GeneratorBuilder().build()

        assert generator.adjectives == tuple(ADJECTIVES)
        assert generator.nouns == tuple(NOUNS)
        assert generator.naming == Naming.plain()
        assert generator.casing == Casing()
        assert generator.length == Length.none()
        assert generator.max_rerolls == DEFAULT_MAX_REROLLS
        assert isinstance(generator.rng, random.Random)

    def test_setters_chain(self):
        builder = GeneratorBuilder()
        assert builder.adjectives(["a"]).nouns(["b"]).naming(Naming.plain()) is builder

    def test_rng_is_used(self):
        rng = random.Random(3)
        assert GeneratorBuilder().rng(rng).build().rng is rng

    def test_empty_adjectives(self):
        with pytest.raises(AdjectivesEmptyError) as exc_info:
            GeneratorBuilder().adjectives([]).build()

        assert str(exc_info.value) == "adjectives must not be empty"

    def test_empty_nouns(self):
        with pytest.raises(NounsEmptyError) as exc_info:
            GeneratorBuilder().nouns([]).build()

        assert str(exc_info.value) == "nouns must not be empty"

    def test_adjectives_checked_first(self):
        with pytest.raises(AdjectivesEmptyError):
            GeneratorBuilder().adjectives([]).nouns([]).build()

    def test_failure_constructs_no_generator(self, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("Generator should not be constructed")

        monkeypatch.setattr(generator_module, "Generator", fail)

        with pytest.raises(NounsEmptyError):
            GeneratorBuilder().nouns([]).build()

    def test_field_set_to_none(self):
        with pytest.raises(UninitializedFieldError) as exc_info:
            GeneratorBuilder().naming(None).build()

        assert exc_info.value.field_name == "naming"
        assert str(exc_info.value) == "uninitialized field: naming"

    def test_invalid_value(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            GeneratorBuilder().max_rerolls(0).build()

        assert str(exc_info.value).startswith("validation error:")

    def test_no_reroll_limit(self):
        assert GeneratorBuilder().max_rerolls(None).build().max_rerolls is None

    def test_errors_share_a_base_class(self):
        for error in (
            AdjectivesEmptyError(),
            NounsEmptyError(),
            UninitializedFieldError("casing"),
            InvalidConfigError("bad"),
        ):
            assert isinstance(error, ConfigurationError)


class TestBuilderFromDict:
    """Test seeding a builder from a settings mapping."""

    def test_reads_known_keys(self):
        generator = GeneratorBuilder.from_dict({
            "adjectives": ["imaginary"],
            "nouns": ["roll"],
            "casing": "ScreamingSnakeCase",
        }).build()

        assert next(generator) == "IMAGINARY_ROLL"

    def test_ignores_unknown_keys(self):
        generator = GeneratorBuilder.from_dict({"rng": "ThreadRng", "colour": "blue"}).build()
        assert generator.naming == Naming.plain()

    def test_rejects_non_mapping(self):
        with pytest.raises(InvalidConfigError):
            GeneratorBuilder.from_dict(["adjectives"])

    def test_rejects_unknown_casing(self):
        with pytest.raises(InvalidConfigError):
            GeneratorBuilder.from_dict({"casing": "Sideways"}).build()

    def test_rejects_non_string_words(self):
        with pytest.raises(InvalidConfigError):
            GeneratorBuilder.from_dict({"adjectives": [1, 2]}).build()

    def test_null_field(self):
        with pytest.raises(UninitializedFieldError):
            GeneratorBuilder.from_dict({"length": None}).build()
