"""
Tests for secp256k1_curve.py - Operations on the secp256k1 curve
"""

import pytest
from curve_ops import point
from curve_ops import secp256k1_curve


CURVE = secp256k1_curve.SECP256K1
G = secp256k1_curve.G

PRIVATE_KEY = 0x3ABA4162C7251C891207B747840551A71939B0DE081F85C4E44CF7C13E41DAA6


class TestParameters:
    """Tests for the secp256k1 constants."""

    def test_field_prime(self):
        """Test the closed form of the field prime."""
        assert secp256k1_curve.P == 2**256 - 2**32 - 977

    def test_curve_coefficients(self):
        """Test the curve equation coefficients."""
        assert (CURVE.a, CURVE.b, CURVE.p) == (0, 7, secp256k1_curve.P)
        assert CURVE.name == "secp256k1"

    def test_generator_on_curve(self):
        """Test that the generator satisfies the curve equation."""
        assert CURVE.verify(G)


class TestPointOperations:
    """Tests for elliptic curve point operations."""

    def test_double_generator(self):
        """Test 2G against its published coordinates."""
        expected = point.Point(
            0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5,
            0x1AE168FEA63DC339A3C58419466CEAEEF7F632653266D0E1236431A950CFE52A,
        )
        assert CURVE.double(G) == expected
        assert CURVE.scalar_mult(2, G) == expected

    def test_triple_generator(self):
        """Test 3G against its published coordinates."""
        expected = point.Point(
            0xF9308A019258C31049344F85F89D5229B531C845836F99B08601F113BCE036F9,
            0x388F7B0F632DE8140FE337E62A37F3566500A99934C2231B6CB9FD7584B8E672,
        )
        assert CURVE.add(G, CURVE.double(G)) == expected
        assert CURVE.scalar_mult(3, G) == expected

    @pytest.mark.parametrize("scalar", [1, 2, 3, 5, 10, 100])
    def test_point_multiply(self, scalar):
        """Test that small multiples of G stay on the curve."""
        result = CURVE.scalar_mult(scalar, G)
        assert not result.is_infinity
        assert CURVE.verify(result)

    def test_multiply_by_one(self):
        """Test that 1 * G is G."""
        assert CURVE.scalar_mult(1, G) == G

    def test_multiply_by_zero(self):
        """Test that 0 * G is infinity."""
        assert CURVE.scalar_mult(0, G).is_infinity

    def test_multiply_by_order(self):
        """Test that N * G is infinity."""
        assert CURVE.scalar_mult(secp256k1_curve.N, G).is_infinity

    def test_multiply_by_order_minus_one(self):
        """Test that (N - 1) * G is -G."""
        assert CURVE.scalar_mult(secp256k1_curve.N - 1, G) == CURVE.negate(G)


class TestPublicKeyDerivation:
    """Tests for deriving a public key from a private key."""

    def test_public_key_on_curve(self):
        """Test that the derived public key satisfies the curve equation."""
        public_key = CURVE.scalar_mult(PRIVATE_KEY, G)
        assert not public_key.is_infinity
        assert 0 <= public_key.x < secp256k1_curve.P
        assert 0 <= public_key.y < secp256k1_curve.P
        assert CURVE.verify(public_key)

    def test_public_key_coordinates(self):
        """Test the derived public key against its known coordinates."""
        expected = point.Point(
            0x5C0DE3B9C8AB18DD04E3511243EC2952002DBFADC864B9628910169D9B9B00EC,
            0x243BCEFDD4347074D44BD7356D6A53C495737DD96295E2A9374BF5F02EBFC176,
        )
        assert CURVE.scalar_mult(PRIVATE_KEY, G) == expected

    def test_public_key_is_linear(self):
        """Test that (k1 + k2) * G equals k1 * G + k2 * G."""
        k1 = PRIVATE_KEY // 3
        k2 = PRIVATE_KEY - k1
        combined = CURVE.add(CURVE.scalar_mult(k1, G), CURVE.scalar_mult(k2, G))
        assert combined == CURVE.scalar_mult(PRIVATE_KEY, G)

    def test_generator_unchanged(self):
        """Test that deriving a key leaves the generator untouched."""
        CURVE.scalar_mult(PRIVATE_KEY, G)
        assert G == point.Point(secp256k1_curve.Gx, secp256k1_curve.Gy)
