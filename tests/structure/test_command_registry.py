"""
Tests for the command registry and longest-prefix matcher.

This module tests path normalization, alias registration, duplicate and
empty path handling, and the match resolution rules.
"""

import pytest

from cmdtree import CommandRegistry, CommandShape, ParserConfig
from cmdtree.exceptions import (
    ConfigurationError,
    DuplicateCommandError,
    EmptyCommandPathError,
)
from cmdtree.structure.registry import CommandDefinition, normalize_path


class One(CommandShape):
    pass


class Two(CommandShape):
    pass


class Three(CommandShape):
    pass


class TestNormalizePath:
    """Tests for normalize_path()."""

    def test_lower_cases_and_splits(self):
        assert normalize_path("  S3   Add ") == ("s3", "add")

    def test_tabs_split(self):
        assert normalize_path("config\tset") == ("config", "set")

    def test_empty(self):
        assert normalize_path("   ") == ()


class TestRegistration:
    """Tests for register() and register_many()."""

    def test_register_returns_definition(self):
        registry = CommandRegistry()
        definition = registry.register("S3 Add", One)
        assert definition.path == ("s3", "add")
        assert definition.name == "s3 add"
        assert definition.shape is One
        assert len(registry) == 1

    def test_register_many_aliases(self):
        registry = CommandRegistry()
        definitions = registry.register_many(One, "s3", "s3 help", "s3 h")
        assert [d.path for d in definitions] == [("s3",), ("s3", "help"), ("s3", "h")]
        assert all(d.shape is One for d in definitions)
        assert len(registry) == 3

    def test_empty_path_rejected(self):
        registry = CommandRegistry()
        with pytest.raises(EmptyCommandPathError):
            registry.register("", One)
        with pytest.raises(EmptyCommandPathError):
            registry.register("  \t", One)
        assert len(registry) == 0

    def test_duplicate_path_rejected(self):
        """Test that registering the same path twice is a configuration error."""
        registry = CommandRegistry()
        registry.register("stats", One)
        with pytest.raises(DuplicateCommandError) as exc_info:
            registry.register("STATS", Two)
        assert exc_info.value.path == "stats"
        assert exc_info.value.existing_shape == "One"
        assert isinstance(exc_info.value, ConfigurationError)

    def test_duplicate_path_allowed_first_wins(self):
        """Test first-registered-wins when duplicates are allowed."""
        registry = CommandRegistry(ParserConfig(allow_duplicate_paths=True))
        registry.register("stats", One)
        registry.register("stats", Two)
        assert len(registry) == 2
        assert registry.find(["stats"]).shape is One

    def test_factory_callable(self):
        """Test that any zero-argument factory works, not only shape classes."""
        registry = CommandRegistry()
        definition = registry.register("one", lambda: One(), shape=One)
        assert definition.shape is One
        assert definition.label == "One"
        assert isinstance(definition.new_value(), One)

    def test_factory_without_shape(self):
        """Test that a non-class factory with no declared shape is labeled by name."""

        def make_one():
            return One()

        registry = CommandRegistry()
        definition = registry.register("one", make_one)
        assert definition.shape is None
        assert registry.list_commands() == [("one", "make_one")]

    def test_registration_never_calls_factory(self):
        """Test that factories run only when a value is needed."""
        calls = []

        def factory():
            calls.append(1)
            return One()

        registry = CommandRegistry(ParserConfig(allow_duplicate_paths=True))
        registry.register("one", factory)
        registry.register_many(factory, "uno", "eins")
        registry.register("one", factory)
        registry.list_commands()
        assert registry.find(["one"]).factory is factory
        assert calls == []

    def test_register_many_with_shape(self):
        registry = CommandRegistry()
        definitions = registry.register_many(lambda: Two(), "a", "b", shape=Two)
        assert [d.shape for d in definitions] == [Two, Two]

    def test_new_value_is_fresh(self):
        definition = CommandDefinition(path=("one",), factory=One)
        assert definition.new_value() is not definition.new_value()

    def test_contains(self):
        registry = CommandRegistry()
        registry.register("s3 add", One)
        assert "s3 add" in registry
        assert "S3  ADD" in registry
        assert "s3" not in registry
        assert 42 not in registry

    def test_iteration_in_registration_order(self):
        registry = CommandRegistry()
        registry.register("b", One)
        registry.register("a", Two)
        assert [d.name for d in registry] == ["b", "a"]

    def test_list_commands_sorted(self):
        registry = CommandRegistry()
        registry.register("tables", Two)
        registry.register_many(One, "s3", "s3 h")
        assert registry.list_commands() == [
            ("s3", "One"),
            ("s3 h", "One"),
            ("tables", "Two"),
        ]

    def test_registries_are_independent(self):
        first = CommandRegistry()
        second = CommandRegistry()
        first.register("stats", One)
        assert "stats" not in second
        second.register("stats", Two)
        assert first.find(["stats"]).shape is One


class TestMatch:
    """Tests for longest-prefix matching."""

    def setup_method(self):
        self.registry = CommandRegistry()
        self.registry.register("s3", One)
        self.registry.register("s3 add", Two)
        self.registry.register("s3 add bulk", Three)

    def test_longest_prefix_wins(self):
        match = self.registry.match(["s3", "add", "name=x"])
        assert match.definition.shape is Two
        assert match.remaining == ["name=x"]

    def test_three_word_path(self):
        match = self.registry.match(["s3", "add", "bulk"])
        assert match.definition.shape is Three
        assert match.remaining == []

    def test_short_path(self):
        match = self.registry.match(["s3"])
        assert match.definition.shape is One
        assert match.remaining == []

    def test_registration_order_irrelevant(self):
        """Test that longer paths win even when registered first."""
        registry = CommandRegistry()
        registry.register("s3 add", Two)
        registry.register("s3", One)
        assert registry.match(["s3", "add"]).definition.shape is Two

    def test_case_insensitive_tokens(self):
        assert self.registry.match(["S3", "Add"]).definition.shape is Two

    def test_no_match(self):
        assert self.registry.match(["frobnicate"]) is None
        assert self.registry.find(["add"]) is None

    def test_prefix_must_be_whole_words(self):
        assert self.registry.match(["s3add"]) is None

    def test_empty_tokens(self):
        assert self.registry.match([]) is None

    def test_remaining_is_copy(self):
        tokens = ["s3", "x"]
        match = self.registry.match(tokens)
        match.remaining.append("y")
        assert tokens == ["s3", "x"]
