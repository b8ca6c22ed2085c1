"""Tests for upload API request signing."""

from unittest.mock import patch

from cloudinary_kit.operations.signing import (
    UNSIGNED_PARAMS,
    build_signed_params,
    sign_parameters,
)


class TestSignParameters:
    """Tests for sign_parameters."""

    def test_documented_example(self) -> None:
        """Test the signature of a known parameter set."""
        params = {"public_id": "sample", "timestamp": "1315060510"}
        assert sign_parameters(params, "abcd") == "c3470533147774275dd37996cc4d0e68fd03cd4f"

    def test_pairs_sorted_by_key(self) -> None:
        """Test parameter order does not change the signature."""
        first = {"timestamp": "1700000000", "public_id": "shoe", "tags": "a,b"}
        second = {"tags": "a,b", "public_id": "shoe", "timestamp": "1700000000"}

        assert sign_parameters(first, "secret") == sign_parameters(second, "secret")

    def test_unsigned_params_ignored(self) -> None:
        """Test transport-only fields are excluded from the signature."""
        params = {
            "public_id": "products/shoe",
            "timestamp": "1700000000",
            "file": "https://example.com/shoe.jpg",
            "resource_type": "image",
            "api_key": "1234567890",
            "cloud_name": "demo",
            "signature": "stale",
        }

        assert sign_parameters(params, "secret") == "e982ce79baf12413fd95c3cf541e4e1a383ab2fd"

    def test_empty_values_ignored(self) -> None:
        """Test empty values do not contribute."""
        params = {"timestamp": "1700000000", "folder": ""}
        assert sign_parameters(params, "secret") == "84af3c6077e429a8e7ff26d2ca13d5feb6bc7cb0"

    def test_lowercase_hex(self) -> None:
        """Test the signature is 40 lowercase hex characters."""
        signature = sign_parameters({"timestamp": "1"}, "secret")

        assert len(signature) == 40
        assert signature == signature.lower()

    def test_unsigned_set(self) -> None:
        """Test the unsigned parameter names."""
        assert UNSIGNED_PARAMS == {"file", "resource_type", "api_key", "cloud_name", "signature"}


class TestBuildSignedParams:
    """Tests for build_signed_params."""

    def test_adds_credentials(self) -> None:
        """Test timestamp, key and signature are added."""
        fields = build_signed_params(
            {"public_id": "products/shoe"}, "1234567890", "secret", timestamp=1700000000
        )

        assert fields == {
            "public_id": "products/shoe",
            "timestamp": "1700000000",
            "signature": "e982ce79baf12413fd95c3cf541e4e1a383ab2fd",
            "api_key": "1234567890",
        }

    def test_multiple_params(self) -> None:
        """Test a signature over several encoded parameters."""
        fields = build_signed_params(
            {
                "public_id": "shoe",
                "tags": "a,b",
                "eager": "c_fill,w_200,h_200|c_scale,w_100",
            },
            "key",
            "secret",
            timestamp=1700000000,
        )

        assert fields["signature"] == "9f60c87126289095530c0c887ebdbafe643f8114"

    def test_default_timestamp_is_unix_seconds(self) -> None:
        """Test the current time is used when no timestamp is given."""
        with patch("cloudinary_kit.operations.signing.time.time", return_value=1700000000.7):
            fields = build_signed_params({}, "key", "secret")

        assert fields["timestamp"] == "1700000000"
        assert fields["signature"] == "84af3c6077e429a8e7ff26d2ca13d5feb6bc7cb0"

    def test_input_not_mutated(self) -> None:
        """Test the caller's mapping is left untouched."""
        params = {"public_id": "shoe"}
        build_signed_params(params, "key", "secret", timestamp=1)

        assert params == {"public_id": "shoe"}
