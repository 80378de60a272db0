# ==============================================
# ModExpCodec
# ==============================================
#
# PURPOSE:
#   Turn each byte of the serialized contact text into an integer
#   (encode) and back (decode) using textbook RSA arithmetic with a
#   fixed, very small key.
#
#     encode_byte(m)    = m ** e mod n
#     decode_integer(c) = c ** d mod n
#
#   With n = 61 * 53 = 3233, e = 17, d = 2753, e * d ≡ 1 mod φ(n), so
#   decode_integer(encode_byte(m)) == m for every byte.
#
# CONSTRAINTS:
# ------------
#   - n must be greater than 255 so every byte is below the modulus.
#   - The key is public. Nothing here is a security boundary.
#
# ==============================================

from typing import Iterable, List


def modexp(base: int, exponent: int, modulus: int) -> int:
    """
    Binary (square-and-multiply) modular exponentiation.

    Args:
        base: Any integer
        exponent: Non-negative exponent
        modulus: Positive modulus

    Returns:
        base ** exponent mod modulus, in [0, modulus)
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    if modulus <= 0:
        raise ValueError(f"modulus must be positive, got {modulus}")

    result = 1 % modulus
    b = base % modulus
    e = exponent
    while e > 0:
        if e & 1:
            result = (result * b) % modulus
        b = (b * b) % modulus
        e >>= 1
    return result


class ModExpCodec:
    """
    Fixed-key per-byte codec.

    Defaults are the key set every existing contacts file was written
    with; change them only together with every file you need to read.
    """

    def __init__(self, n: int = 3233, e: int = 17, d: int = 2753):
        if n <= 255:
            raise ValueError(f"modulus n must be greater than 255, got {n}")
        if e < 0 or d < 0:
            raise ValueError("exponents must be non-negative")
        self.n = n
        self.e = e
        self.d = d

    def encode_byte(self, m: int) -> int:
        if not 0 <= m <= 255:
            raise ValueError(f"encode_byte() expects a byte value 0..255, got {m}")
        return modexp(m, self.e, self.n)

    def decode_integer(self, c: int) -> int:
        """
        Decode one integer back to a byte.

        Any integer is accepted. Values not produced by encode_byte()
        still decode to something; the result is narrowed to its low
        8 bits.
        """
        return modexp(c, self.d, self.n) & 0xFF

    def encode_bytes(self, data: bytes) -> List[int]:
        return [self.encode_byte(b) for b in data]

    def decode_integers(self, values: Iterable[int]) -> bytes:
        return bytes(self.decode_integer(c) for c in values)
