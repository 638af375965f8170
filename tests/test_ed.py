from secrets import token_bytes

import nacl.bindings as sodium
import pytest

from edsigner.ed import G, ZERO, EdPoint, d, decodepoint, edwards, encodepoint, on_curve, scalarmult, try_decodepoint, xrecover
from edsigner.exceptions import InvalidKeyFormat, InvalidPoint
from edsigner.field import fe, q
from edsigner.util import tobytes, toint


def random_scalar():
  return toint(token_bytes(32)) % q

def test_constants():
  assert d == fe(-121665) / fe(121666)
  assert G == EdPoint.from_y(fe(4) / fe(5), False)
  assert G.is_on_curve
  assert ZERO.is_on_curve
  assert bytes(G).hex() == "58" + 31 * "66"
  assert repr(ZERO) == "ZERO"
  assert repr(G) == "G"
  assert str(ZERO) == "01" + 31 * "00"


def test_group():
  a, b = random_scalar(), random_scalar()
  assert ZERO + G == G
  assert G - G == ZERO
  assert 2 * G == G + G == edwards(G, G)
  assert G * 3 == G + G + G
  assert (a + b) * G == a * G + b * G
  assert a * (b * G) == b * (a * G)
  # The base point has prime order q
  assert q * G == ZERO
  assert (q + 1) * G == G
  # Scalars are not reduced but the result is the same
  assert (a + 5 * q) * G == a * G
  assert scalarmult(2**511 + a, G) == scalarmult((2**511 + a) % q, G)
  assert scalarmult(0, G) == ZERO
  assert scalarmult(1, G) == G
  with pytest.raises(ValueError):
    scalarmult(-1, G)
  with pytest.raises(TypeError):
    G == bytes(G)


def test_vs_sodium():
  a, b = random_scalar(), random_scalar()
  A, B = a * G, b * G
  assert bytes(A) == sodium.crypto_scalarmult_ed25519_base_noclamp(tobytes(a))
  assert bytes(A + B) == sodium.crypto_core_ed25519_add(bytes(A), bytes(B))
  assert bytes(b * A) == sodium.crypto_scalarmult_ed25519_noclamp(tobytes(b), bytes(A))


def test_codec():
  P = random_scalar() * G
  assert P.is_on_curve
  assert decodepoint(encodepoint(P)) == P
  assert EdPoint.from_bytes(bytes(P)) == P
  assert decodepoint(bytes(-P)) == -P
  # Only the sign bit differs between P and -P
  assert toint(bytes(P)) ^ toint(bytes(-P)) == 1 << 255
  # x is recovered as the even root
  assert not xrecover(P.y).is_odd
  assert decodepoint(bytes(ZERO)) == ZERO
  # Negative zero is accepted as the neutral element
  assert decodepoint(tobytes(1 | 1 << 255)) == ZERO


def test_decode_errors(offcurve):
  bad = offcurve
  assert isinstance(try_decodepoint(bad), InvalidPoint)
  assert isinstance(try_decodepoint(b""), InvalidKeyFormat)
  assert isinstance(try_decodepoint("x" * 32), InvalidKeyFormat)
  assert isinstance(try_decodepoint(bytes(G)), EdPoint)

  with pytest.raises(InvalidPoint):
    decodepoint(bad)
  with pytest.raises(InvalidKeyFormat):
    decodepoint(bytes(31))
  with pytest.raises(InvalidKeyFormat):
    decodepoint(bytes(G) + b"\0")

  assert on_curve(bytes(G))
  assert on_curve(bytearray(bytes(G)))
  assert not on_curve(bad)
  assert not on_curve(b"")
  assert not on_curve(None)
  assert not on_curve(32)
