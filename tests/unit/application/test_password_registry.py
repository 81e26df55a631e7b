"""Unit tests for PasswordRegistry"""

from unittest.mock import patch

import pytest

from easy_password.application.services.password_registry import (
    PasswordRegistry,
    get_registry,
    reset_registry,
)
from easy_password.domain.exceptions import (
    CheckerNotFound,
    GeneratorNotFound,
    InvalidGenerator,
)
from easy_password.infrastructure.config import Settings


class TestRegistration:
    """Test cases for generator and checker registration"""

    def test_generator_registration_replaces(self, registry):
        """Test re-registering a generator replaces it"""
        registry.register_generator("fixed", lambda: "first")
        registry.register_generator("fixed", lambda: "second")

        assert registry.generate("fixed") == "second"
        assert registry.generator_names() == ["fixed"]

    def test_checker_registration_first_wins(self, registry):
        """Test re-registering a checker keeps the first one"""
        registry.register_checker("length", lambda pw, all_reasons: "first")
        registry.register_checker("length", lambda pw, all_reasons: "second")

        assert registry.get_checker("length")("x", True) == "first"
        assert registry.checker_names() == ["length"]

    def test_replaced_generator_is_logged(self, registry):
        """Test replacing a generator is logged"""
        registry.register_generator("fixed", lambda: "first")

        with patch(
            "easy_password.application.services.password_registry.logger"
        ) as mock_logger:
            registry.register_generator("fixed", lambda: "second")

            mock_logger.info.assert_called_once_with("Generator replaced", generator="fixed")

    def test_ignored_checker_is_logged(self, registry):
        """Test an ignored checker registration is logged"""
        registry.register_checker("length", lambda pw, all_reasons: None)

        with patch(
            "easy_password.application.services.password_registry.logger"
        ) as mock_logger:
            registry.register_checker("length", lambda pw, all_reasons: True)

            mock_logger.debug.assert_called_once_with(
                "Checker already registered, ignoring", checker="length"
            )

    def test_decorator_registration(self, registry):
        """Test registration used as a decorator"""
        @registry.register_generator("deco")
        def deco():
            return "from-decorator"

        @registry.register_checker("short")
        def short(password, all_reasons):
            return len(password) < 4

        assert deco() == "from-decorator"
        assert registry.generate("deco") == "from-decorator"
        assert registry.get_checker("short") is short

    def test_names_keep_registration_order(self, registry):
        """Test names are listed in registration order"""
        for name in ("b", "a", "c"):
            registry.register_checker(name, lambda pw, all_reasons: None)

        assert registry.checker_names() == ["b", "a", "c"]
        assert [name for name, _ in registry.checker_items()] == ["b", "a", "c"]

    def test_has_checkers(self, registry):
        """Test has_checkers reflects registrations"""
        assert registry.has_checkers() is False

        registry.register_checker("x", lambda pw, all_reasons: None)

        assert registry.has_checkers() is True


class TestDefaults:
    """Test cases for default generator and checkers"""

    def test_initial_defaults(self, registry):
        """Test a new registry has no defaults and hides passwords"""
        assert registry.get_default_generator() is None
        assert registry.get_default_checkers() is None
        assert registry.hide is True

    def test_set_default_generator(self, registry):
        """Test setting the default generator"""
        registry.set_default_generator("random")

        assert registry.get_default_generator() == "random"

    def test_set_default_checkers(self, registry):
        """Test default checkers are stored without duplicates"""
        registry.set_default_checkers(["length", "aA1", "length"])

        assert registry.get_default_checkers() == ("length", "aA1")

    @pytest.mark.parametrize("value", [None, [], ()])
    def test_empty_default_checkers_means_all(self, registry, value):
        """Test empty default checkers reset to all"""
        registry.set_default_checkers(["length"])
        registry.set_default_checkers(value)

        assert registry.get_default_checkers() is None

    def test_from_settings(self):
        """Test values are taken from Settings"""
        settings = Settings(
            hide=False, default_generator="random", default_checkers=["length", "common"]
        )

        registry = PasswordRegistry.from_settings(settings)

        assert registry.hide is False
        assert registry.get_default_generator() == "random"
        assert registry.get_default_checkers() == ("length", "common")


class TestGenerate:
    """Test cases for generate"""

    def test_generate_with_default(self, registry):
        """Test generate uses the default generator"""
        registry.register_generator("fixed", lambda: "s3cret")
        registry.set_default_generator("fixed")

        assert registry.generate() == "s3cret"

    def test_explicit_name_overrides_default(self, registry):
        """Test an explicit generator name wins over the default"""
        registry.register_generator("one", lambda: "1")
        registry.register_generator("two", lambda: "2")
        registry.set_default_generator("one")

        assert registry.generate("two") == "2"

    def test_no_default_is_invalid(self, registry):
        """Test generate without any generator name fails"""
        registry.register_generator("fixed", lambda: "s3cret")

        with pytest.raises(InvalidGenerator, match="invalid generator type"):
            registry.generate()

    def test_invalid_generator_is_value_error(self, registry):
        """Test InvalidGenerator is a ValueError"""
        with pytest.raises(ValueError):
            registry.generate()

    def test_unknown_generator(self, registry):
        """Test generate with an unregistered name fails"""
        with pytest.raises(GeneratorNotFound) as exc_info:
            registry.generate("missing")

        assert exc_info.value.name == "missing"
        assert "requested generator 'missing' doesn't exist" in str(exc_info.value)

    def test_unknown_default_generator(self, registry):
        """Test an unregistered default generator fails"""
        registry.set_default_generator("missing")

        with pytest.raises(GeneratorNotFound):
            registry.generate()

    def test_generator_errors_propagate(self, registry):
        """Test generator exceptions propagate unchanged"""
        def broken():
            raise RuntimeError("entropy source unavailable")

        registry.register_generator("broken", broken)

        with pytest.raises(RuntimeError, match="entropy source unavailable"):
            registry.generate("broken")


class TestLookups:
    """Test cases for checker lookup"""

    def test_unknown_checker(self, registry):
        """Test looking up an unregistered checker fails"""
        with pytest.raises(CheckerNotFound) as exc_info:
            registry.get_checker("nonexistent")

        assert exc_info.value.name == "nonexistent"
        assert str(exc_info.value) == "requested checker 'nonexistent' doesn't exist"

    def test_checker_not_found_is_key_error(self, registry):
        """Test CheckerNotFound is a KeyError"""
        with pytest.raises(KeyError):
            registry.get_checker("nonexistent")


class TestProcessRegistry:
    """Test cases for the process-wide registry"""

    def test_get_registry_is_singleton(self):
        """Test get_registry returns the same registry"""
        assert get_registry() is get_registry()

    def test_reset_registry(self):
        """Test reset_registry drops the process-wide registry"""
        first = get_registry()
        reset_registry()

        assert get_registry() is not first

    def test_built_from_environment(self, monkeypatch):
        """Test the process-wide registry reads the environment"""
        monkeypatch.setenv("EASY_PASSWORD_HIDE", "false")
        monkeypatch.setenv("EASY_PASSWORD_DEFAULT_GENERATOR", "alphanumeric")
        monkeypatch.setenv("EASY_PASSWORD_DEFAULT_CHECKERS", "length,common")

        registry = get_registry()

        assert registry.hide is False
        assert registry.get_default_generator() == "alphanumeric"
        assert registry.get_default_checkers() == ("length", "common")
