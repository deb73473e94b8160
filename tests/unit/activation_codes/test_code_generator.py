"""
Unit tests for activation code generation.
"""

from activation_codes.domain.activation_code import (
    ACTIVATION_CODE_ALPHABET,
    ACTIVATION_CODE_LENGTH,
    generate_activation_code,
)


class TestGenerateActivationCode:
    """Tests for generate_activation_code."""

    def test_default_length(self):
        """Test generated codes have the default length."""
        assert len(generate_activation_code()) == ACTIVATION_CODE_LENGTH == 18

    def test_custom_length(self):
        """Test a custom length is honoured."""
        assert len(generate_activation_code(24)) == 24

    def test_alphabet_and_uniqueness(self):
        """Test 10,000 codes use only [0-9A-Z] and never repeat."""
        allowed = set(ACTIVATION_CODE_ALPHABET)
        codes = [generate_activation_code() for _ in range(10_000)]

        for code in codes:
            assert len(code) == 18
            assert set(code) <= allowed
        assert len(set(codes)) == len(codes)

    def test_alphabet_is_digits_and_uppercase(self):
        """Test the alphabet is exactly 36 characters."""
        assert ACTIVATION_CODE_ALPHABET == "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
