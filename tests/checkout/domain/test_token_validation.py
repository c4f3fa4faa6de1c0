"""Tests for single-use token validation."""

import pytest
from checkout.errors import MissingToken
from checkout.pipeline.validation import validate_token


class TestValidateToken:
    def test_valid_token_returned(self):
        assert validate_token("tok_123") == "tok_123"

    def test_token_forwarded_unchanged(self):
        assert validate_token("  tok_123 ") == "  tok_123 "

    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_missing_token_rejected(self, token):
        with pytest.raises(MissingToken):
            validate_token(token)
