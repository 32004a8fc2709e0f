"""Tests for depositor ID generation."""

import re

import pytest

from depositbook.config import IdentifierSettings
from depositbook.errors import IdentifierExhaustedError
from depositbook.services.ids import RandomIdGenerator, SequenceIdGenerator


class TestRandomIdGenerator:
    """Tests for randomly drawn IDs."""
    
    def test_ids_have_prefix_and_six_digits(self):
        """Every ID is PZ followed by a number in range."""
        generator = RandomIdGenerator(IdentifierSettings())
        for _ in range(200):
            depositor_id = generator.generate()
            assert re.fullmatch(r"PZ\d{6}", depositor_id)
            assert 100000 <= int(depositor_id[2:]) <= 999999
    
    def test_same_seed_same_sequence(self):
        """A seed makes the sequence reproducible."""
        first = RandomIdGenerator(IdentifierSettings(), seed=42)
        second = RandomIdGenerator(IdentifierSettings(), seed=42)
        assert [first.generate() for _ in range(5)] == [second.generate() for _ in range(5)]
    
    def test_seed_from_settings(self):
        """The seed can come from settings instead of the constructor."""
        first = RandomIdGenerator(IdentifierSettings(random_seed=7))
        second = RandomIdGenerator(IdentifierSettings(), seed=7)
        assert first.generate() == second.generate()
    
    def test_range_and_prefix_from_settings(self):
        """Prefix and range are read from settings."""
        settings = IdentifierSettings(prefix="ab", min_value=123456, max_value=123456)
        assert RandomIdGenerator(settings).generate() == "AB123456"


class TestSequenceIdGenerator:
    """Tests for the fixed-sequence generator."""
    
    def test_yields_ids_in_order(self):
        """IDs come out in the order given."""
        generator = SequenceIdGenerator(["PZ100001", "PZ100002"])
        assert generator.generate() == "PZ100001"
        assert generator.generate() == "PZ100002"
    
    def test_raises_when_exhausted(self):
        """Running past the end raises."""
        generator = SequenceIdGenerator(["PZ100001"])
        generator.generate()
        with pytest.raises(IdentifierExhaustedError):
            generator.generate()
