"""Integration tests for the JWT token service.

Tests the JWTService implementation with real cryptographic operations.

Architecture:
- Tests against the real PyJWT library (no mocking)
- Verifies Result type error handling
- Tests security properties (uniqueness, expiration, tampering)
"""

from datetime import timedelta

import jwt
import pytest
from freezegun import freeze_time

from routeforge.core.result import Failure, Success
from routeforge.domain.errors import AuthenticationError
from routeforge.infrastructure.security.jwt_service import JWTService

SECRET = "x" * 32


@pytest.mark.integration
class TestJWTServiceIntegration:
    """Integration tests for JWT service.

    Uses real PyJWT operations. No fixtures needed - service is stateless.
    """

    # =========================================================================
    # Signing
    # =========================================================================

    def test_sign_creates_valid_jwt(self):
        """Test that a signed token has valid JWT structure (3 parts)."""
        token = JWTService(secret_key=SECRET).sign({"sub": "u1"})

        parts = token.split(".")
        assert len(parts) == 3
        assert all(len(part) > 0 for part in parts)

    def test_round_trip_preserves_claims(self):
        """Test verify(sign(claims)) returns the claims plus registered ones."""
        service = JWTService(secret_key=SECRET)

        result = service.verify(service.sign({"sub": "u1", "roles": ["admin"]}))

        assert isinstance(result, Success)
        assert result.value["sub"] == "u1"
        assert result.value["roles"] == ["admin"]
        assert {"iat", "exp", "jti"} <= set(result.value)

    def test_default_lifetime_is_one_hour(self):
        """Test exp - iat equals the default one-hour lifetime."""
        service = JWTService(secret_key=SECRET)

        claims = service.verify(service.sign({"sub": "u1"})).value

        assert claims["exp"] - claims["iat"] == 3600

    def test_expires_in_override(self):
        """Test a per-token lifetime override."""
        service = JWTService(secret_key=SECRET)

        claims = service.verify(
            service.sign({"sub": "u1"}, expires_in=timedelta(minutes=5))
        ).value

        assert claims["exp"] - claims["iat"] == 300

    def test_jti_unique_per_token(self):
        """Test two tokens for the same claims carry different jti values."""
        service = JWTService(secret_key=SECRET)

        first = service.verify(service.sign({"sub": "u1"})).value
        second = service.verify(service.sign({"sub": "u1"})).value

        assert first["jti"] != second["jti"]

    def test_hs256_header(self):
        """Test tokens are signed with HS256."""
        token = JWTService(secret_key=SECRET).sign({"sub": "u1"})

        assert jwt.get_unverified_header(token)["alg"] == "HS256"

    # =========================================================================
    # Verification failures
    # =========================================================================

    def test_expired_token(self):
        """Test a token past exp fails with EXPIRED_TOKEN."""
        service = JWTService(secret_key=SECRET)
        with freeze_time("2024-01-01 12:00:00"):
            token = service.sign({"sub": "u1"}, expires_in=timedelta(minutes=1))

        with freeze_time("2024-01-01 12:02:00"):
            result = service.verify(token)

        assert isinstance(result, Failure)
        assert result.error == AuthenticationError.EXPIRED_TOKEN

    def test_token_valid_before_expiry(self):
        """Test a token verifies until its exp."""
        service = JWTService(secret_key=SECRET)
        with freeze_time("2024-01-01 12:00:00"):
            token = service.sign({"sub": "u1"}, expires_in=timedelta(minutes=1))

        with freeze_time("2024-01-01 12:00:30"):
            result = service.verify(token)

        assert isinstance(result, Success)

    def test_wrong_secret(self):
        """Test a token signed with another secret is invalid."""
        token = JWTService(secret_key="y" * 32).sign({"sub": "u1"})

        result = JWTService(secret_key=SECRET).verify(token)

        assert result == Failure(error=AuthenticationError.INVALID_TOKEN)

    def test_tampered_payload(self):
        """Test modifying the payload segment invalidates the signature."""
        service = JWTService(secret_key=SECRET)
        header, _, signature = service.sign({"sub": "u1"}).split(".")
        forged_payload = service.sign({"sub": "admin"}).split(".")[1]

        result = service.verify(f"{header}.{forged_payload}.{signature}")

        assert result == Failure(error=AuthenticationError.INVALID_TOKEN)

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_malformed_token(self, token):
        """Test malformed input fails instead of raising."""
        result = JWTService(secret_key=SECRET).verify(token)

        assert result == Failure(error=AuthenticationError.INVALID_TOKEN)

    # =========================================================================
    # Construction
    # =========================================================================

    def test_empty_secret_rejected(self):
        """Test an empty secret raises ValueError."""
        with pytest.raises(ValueError, match="must not be empty"):
            JWTService(secret_key="")

    def test_non_positive_lifetime_rejected(self):
        """Test a zero lifetime raises ValueError."""
        with pytest.raises(ValueError, match="must be positive"):
            JWTService(secret_key=SECRET, expiration=timedelta(0))
