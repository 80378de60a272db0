# ==============================================
# Tests for Codec Module
# ==============================================

import pytest

from contactbook.codec.mod_exp import ModExpCodec, modexp


class TestModExp:
    """Tests for the square-and-multiply helper."""

    def test_matches_builtin_pow(self):
        for base, exponent, modulus in [(4, 13, 497), (65, 17, 3233), (2790, 2753, 3233), (0, 5, 7), (7, 0, 13)]:
            assert modexp(base, exponent, modulus) == pow(base, exponent, modulus)

    def test_result_in_range(self):
        assert 0 <= modexp(-5, 3, 11) < 11
        assert modexp(-5, 3, 11) == pow(-5, 3, 11)

    def test_modulus_one(self):
        assert modexp(123, 0, 1) == 0

    def test_negative_exponent_rejected(self):
        with pytest.raises(ValueError):
            modexp(2, -1, 7)

    def test_non_positive_modulus_rejected(self):
        with pytest.raises(ValueError):
            modexp(2, 3, 0)


class TestModExpCodec:
    """Tests for the per-byte encode/decode pair."""

    def test_round_trip_every_byte(self, codec):
        for m in range(256):
            assert codec.decode_integer(codec.encode_byte(m)) == m

    def test_known_values(self, codec):
        # 65 ** 17 mod 3233 is the classic textbook example
        assert codec.encode_byte(65) == 2790
        assert codec.decode_integer(2790) == 65

    def test_encoded_values_below_modulus(self, codec):
        assert all(0 <= codec.encode_byte(m) < codec.n for m in range(256))

    def test_encode_rejects_non_byte(self, codec):
        with pytest.raises(ValueError):
            codec.encode_byte(256)
        with pytest.raises(ValueError):
            codec.encode_byte(-1)

    def test_decode_accepts_any_integer(self, codec):
        for c in (0, 3232, 3233, 10**6, -7):
            assert 0 <= codec.decode_integer(c) <= 255

    def test_bulk_helpers(self, codec):
        data = "Ann|+44123|a@b.c|\n".encode("utf-8")
        assert codec.decode_integers(codec.encode_bytes(data)) == data

    def test_small_modulus_rejected(self):
        with pytest.raises(ValueError):
            ModExpCodec(n=255, e=3, d=7)
