from __future__ import annotations

from functools import cached_property
from typing import Union

from .exceptions import Ed25519Error, InvalidKeyFormat, InvalidPoint
from .field import fe, minus1, one, p38, sqrtm1, zero
from .util import isbytes, tobytes, tointsign

# Twisted Edwards curve: a x2 + y2 = 1 + d x2 y2
# Ed25519 constants:
a, d = minus1, -fe(121665) / fe(121666)

# Points are affine (x, y) pairs of field elements. Every operation returns a
# new point and none of them is ever modified after construction.

class EdPoint:
  def __init__(self, x: fe, y: fe):
    self.x = x
    self.y = y

  @staticmethod
  def from_bytes(b) -> EdPoint:
    """Read standard Ed25519 public key (or the R part of a signature)"""
    return decodepoint(b)

  @staticmethod
  def from_y(y: fe, negative=False) -> EdPoint:
    """Restore from a y coordinate and an is_negative flag (not validated)"""
    P = EdPoint(xrecover(y), y)
    return P if P.is_negative == negative else -P

  @cached_property
  def mont(self) -> fe:
    """Convert the y coordinate into a Curve25519 u coordinate. sign is not included."""
    # For ZERO the divisor is zero and inv(0) == 0 gives u = 0
    return (one + self.y) / (one - self.y)

  @cached_property
  def montbytes(self) -> bytes:
    """Provides a 32-byte Curve25519 pk with zero high bit"""
    return tobytes(self.mont.val)

  def __repr__(self): return point_name(self)
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return encodepoint(self)
  def __hash__(self): return self.y.val

  @cached_property
  def is_negative(self) -> bool:
    """Return the parity of the x coordinate, aka the sign."""
    return self.x.is_odd

  @cached_property
  def is_on_curve(self) -> bool:
    x2, y2 = self.x.sq, self.y.sq
    return a * x2 + y2 - one - d * x2 * y2 == zero

  def __add__(self, othr: EdPoint) -> EdPoint:
    if not isinstance(othr, EdPoint): return NotImplemented
    return edwards(self, othr)

  def __sub__(self, othr: EdPoint) -> EdPoint:
    return self + -othr

  def __neg__(self) -> EdPoint:
    return EdPoint(-self.x, self.y)

  def __mul__(self, s: int) -> EdPoint:
    """Multiply the point by scalar (secret key)."""
    if not isinstance(s, int): return NotImplemented
    return scalarmult(s, self)

  def __rmul__(self, s: int) -> EdPoint:
    return self * s

  def __eq__(self, othr):
    if not isinstance(othr, EdPoint): raise TypeError(f"EdPoints cannot be compared with {type(othr)}")
    return self.x == othr.x and self.y == othr.y


def edwards(P1: EdPoint, P2: EdPoint) -> EdPoint:
  """Affine point addition, complete for Ed25519 (also used for doubling)"""
  x1, y1, x2, y2 = P1.x, P1.y, P2.x, P2.y
  dxy = d * x1 * x2 * y1 * y2
  x = (x1 * y2 + x2 * y1) / (one + dxy)
  y = (y1 * y2 + x1 * x2) / (one - dxy)
  return EdPoint(x, y)

def scalarmult(e: int, P: EdPoint) -> EdPoint:
  """
  Multiply point P by any non-negative integer e.

  The scalar is used as is, without reducing modulo the group order, so e.g.
  512-bit nonces work directly. Not constant time.
  """
  if e < 0: raise ValueError("Scalar must not be negative")
  Q = ZERO
  # Double-and-add from the highest bit down
  for n in reversed(range(e.bit_length())):
    Q = edwards(Q, Q)
    if e >> n & 1: Q = edwards(Q, P)
  return Q


def xrecover(y: fe) -> fe:
  """Recover the even x coordinate for y (only meaningful if the point exists)"""
  xx = (y.sq - one) / (d * y.sq + one)
  # Note that p is congruent to 5 modulo 8, so (p+3)/8 is an integer.
  x = xx**p38
  if x.sq != xx: x *= sqrtm1
  return -x if x.is_odd else x

def encodepoint(P: EdPoint) -> bytes:
  """Compressed encoding: y in the low 255 bits, parity of x in the high bit"""
  return tobytes(P.y.val | P.is_negative << 255)

def try_decodepoint(b) -> Union[EdPoint, Ed25519Error]:
  """Decode a compressed point, returning rather than raising an error on failure."""
  if not isbytes(b): return InvalidKeyFormat(f"Point encoding should be bytes, not {type(b).__name__}")
  if len(b) != 32: return InvalidKeyFormat(f"Point encoding should be 32 bytes, got {len(b)}")
  y, sign = tointsign(b)
  P = EdPoint.from_y(fe(y), sign)
  if not P.is_on_curve: return InvalidPoint("Not a curve point on Ed25519")
  return P

def decodepoint(b) -> EdPoint:
  """Decode a compressed point. Raises InvalidKeyFormat or InvalidPoint."""
  P = try_decodepoint(b)
  if isinstance(P, Ed25519Error): raise P
  return P

def on_curve(b) -> bool:
  """Check whether b is a valid compressed Ed25519 point (never raises)"""
  return isinstance(try_decodepoint(b), EdPoint)


# Neutral element
ZERO = EdPoint(zero, one)

# Base point (prime group generator)
G = EdPoint(
  fe(15112221349535400772501151409588531511454012693041857206046113283949847762202),
  fe(46316835694926478169428394003475163141307993866256225615783033603165251855960),
)


def point_name(P: EdPoint) -> str:
  """Return variable names rather than xy coordinates for any constants defined here"""
  for name, val in globals().items():
    if isinstance(val, EdPoint) and P == val:
      return name
  return f"EdPoint({P.x!r}, {P.y!r})"
