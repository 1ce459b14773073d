"""Unit tests for record id and check-number generation."""

import re

from src.services.identity import RandomIdProvider, generate_check_number
from tests.fakes import SequentialIdProvider


class TestRandomIdProvider:
    """Verify the production id provider."""

    def test_record_ids_are_unique(self):
        provider = RandomIdProvider()
        ids = {provider.new_record_id() for _ in range(100)}
        assert len(ids) == 100

    def test_suffix_alphabet_and_length(self):
        provider = RandomIdProvider()
        for _ in range(50):
            assert re.fullmatch(r"[A-Z0-9]{6}", provider.random_suffix(6))


class TestGenerateCheckNumber:
    """Verify prefix, length and collision avoidance."""

    def test_default_format(self):
        check = generate_check_number(RandomIdProvider())
        assert re.fullmatch(r"CHK-[A-Z0-9]{6}", check)

    def test_custom_prefix_and_length(self):
        provider = SequentialIdProvider(suffixes=["ABCDEFGH"])
        assert generate_check_number(provider, prefix="T-", length=4) == "T-ABCD"

    def test_skips_existing(self):
        provider = SequentialIdProvider(suffixes=["AAAAAA", "BBBBBB"])
        check = generate_check_number(provider, existing={"CHK-AAAAAA"})
        assert check == "CHK-BBBBBB"

    def test_gives_up_after_max_attempts(self):
        """A provider that only repeats itself ends with the colliding value."""
        provider = SequentialIdProvider(suffixes=["AAAAAA"])
        check = generate_check_number(provider, existing={"CHK-AAAAAA"}, max_attempts=3)
        assert check == "CHK-AAAAAA"
