"""
tests/test_policy.py
====================
Tests for PasswordPolicy defaults, fallbacks and settings mapping.
"""
import pytest
from pydantic import ValidationError

from passgauge.core.config import Settings
from passgauge.models.policy import DEFAULT_PASSWORD_POLICY, IdentityHints, PasswordPolicy


class TestDefaults:

    def test_default_constant(self):
        assert DEFAULT_PASSWORD_POLICY.model_dump() == {
            "min_length": 10,
            "min_strength_score": 3,
            "require_lowercase": True,
            "require_uppercase": True,
            "require_digit": True,
            "require_symbol": False,
            "min_unique_chars": 6,
            "block_weak_patterns": True,
        }

    def test_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_PASSWORD_POLICY.min_length = 1

    @pytest.mark.parametrize("field,value", [
        ("min_length", -1),
        ("min_strength_score", 5),
        ("min_unique_chars", -3),
    ])
    def test_constraints(self, field, value):
        with pytest.raises(ValidationError):
            PasswordPolicy(**{field: value})

    def test_identity_hints_optional(self):
        hints = IdentityHints()
        assert hints.username is None
        assert hints.email is None


class TestFromPartial:

    @pytest.mark.parametrize("data", [None, {}])
    def test_empty_returns_default_constant(self, data):
        assert PasswordPolicy.from_partial(data) is DEFAULT_PASSWORD_POLICY

    def test_missing_fields_use_defaults(self):
        policy = PasswordPolicy.from_partial({"min_length": 12})
        assert policy.min_length == 12
        assert policy.min_unique_chars == 6

    def test_malformed_fields_use_defaults(self):
        policy = PasswordPolicy.from_partial({
            "min_length": -1,
            "min_strength_score": 9,
            "require_digit": "not-a-bool",
            "min_unique_chars": 3,
        })
        assert policy.min_length == 10
        assert policy.min_strength_score == 3
        assert policy.require_digit is True
        assert policy.min_unique_chars == 3

    def test_unknown_fields_ignored(self):
        assert PasswordPolicy.from_partial({"max_length": 64}) == DEFAULT_PASSWORD_POLICY

    def test_logs_field_name_only(self, caplog):
        PasswordPolicy.from_partial({"min_length": "secret-value"})
        assert "min_length" in caplog.text
        assert "secret-value" not in caplog.text


class TestFromSettings:

    def test_defaults_match_default_policy(self):
        config = Settings(
            auth_password_min_length=10,
            auth_password_min_strength_score=3,
            auth_password_min_unique_chars=6,
            auth_password_require_lowercase=True,
            auth_password_require_uppercase=True,
            auth_password_require_digit=True,
            auth_password_require_symbol=False,
            auth_password_block_weak_patterns=True,
        )
        assert PasswordPolicy.from_settings(config) == DEFAULT_PASSWORD_POLICY

    @pytest.mark.parametrize("length,score,unique,expected", [
        (4, 0, 0, (8, 1, 1)),
        (500, 9, 100, (128, 4, 64)),
        (12, 2, 8, (12, 2, 8)),
    ])
    def test_thresholds_clamped(self, length, score, unique, expected):
        config = Settings(
            auth_password_min_length=length,
            auth_password_min_strength_score=score,
            auth_password_min_unique_chars=unique,
        )
        policy = PasswordPolicy.from_settings(config)
        assert (policy.min_length, policy.min_strength_score, policy.min_unique_chars) == expected

    def test_flags_copied(self):
        config = Settings(auth_password_require_symbol=True, auth_password_block_weak_patterns=False)
        policy = PasswordPolicy.from_settings(config)
        assert policy.require_symbol is True
        assert policy.block_weak_patterns is False


class TestRequestSchemas:

    def test_requests_carry_identity_hints(self):
        from passgauge.controllers.schemas import PasswordCheckRequest, PasswordStrengthRequest

        for schema in (PasswordStrengthRequest, PasswordCheckRequest):
            assert issubclass(schema, IdentityHints)
            request = schema(password="x", username="bob", email="bob@example.com")
            assert (request.username, request.email) == ("bob", "bob@example.com")
