"""Tests for the configured univariate extension evaluator."""

import numpy as np
import pytest

from extensions import EmptyMessageError, ExtensionConfig, UnivariateExtension
from primitives.encoding import UnmappedSymbolError
from primitives.field import FF, get_field


class TestExtensionConfig:
    """Configuration defaults and validation."""

    def test_defaults(self) -> None:
        config = ExtensionConfig()
        assert config.field_name == "goldilocks"
        assert config.encoding == "ascii"
        assert config.field is FF

    def test_pallas(self) -> None:
        assert ExtensionConfig(field_name="pallas").field is get_field("pallas")

    def test_unknown_field(self) -> None:
        with pytest.raises(ValueError):
            ExtensionConfig(field_name="mersenne")

    def test_unknown_encoding(self) -> None:
        """Unknown encoding names fail like unknown field names."""
        with pytest.raises(ValueError, match="Unknown encoding") as exc_info:
            ExtensionConfig(encoding="latin-1")
        assert not isinstance(exc_info.value, UnmappedSymbolError)


class TestUnivariateExtension:
    """Evaluation through a configured evaluator."""

    def test_default_config(self) -> None:
        """Without a config the Goldilocks field and ASCII are used."""
        extension = UnivariateExtension()
        assert extension.field is FF
        assert int(extension.evaluate("AB", 2)) == 67

    @pytest.mark.parametrize("field_name", ["goldilocks", "pallas"])
    def test_evaluate(self, field_name: str) -> None:
        """Int points are placed in the configured field."""
        extension = UnivariateExtension(ExtensionConfig(field_name=field_name))
        result = extension.evaluate("AB", -1)
        assert type(result) is extension.field
        assert int(result) == 64

    def test_evaluate_encoded(self) -> None:
        """Pre-encoded vectors can be opened repeatedly."""
        extension = UnivariateExtension()
        coeffs = extension.encode("ABD")
        assert [int(extension.evaluate_encoded(coeffs, r)) for r in [0, 3, 10]] == [65, 71, 120]

    def test_evaluate_many(self) -> None:
        extension = UnivariateExtension()
        results = extension.evaluate_many("ABC", [0, 1, 2, 5, -1])
        assert np.array_equal(results, FF([65, 66, 67, 70, 64]))

    def test_codepoint_encoding(self) -> None:
        extension = UnivariateExtension(ExtensionConfig(encoding="codepoint"))
        assert int(extension.evaluate("€", 3)) == 8364

    def test_empty_message(self) -> None:
        with pytest.raises(EmptyMessageError):
            UnivariateExtension().evaluate("", 4)
