from __future__ import annotations

from functools import cached_property

# Field prime
p = 2**255 - 19

# Precalculate commonly needed parts of the prime
p2 = (p - 1) // 2
p4 = (p - 1) // 4
p38 = (p + 3) // 8

# Group order of the base point (called l in RFC 8032)
q = 2**252 + 27742317777372353535851937790883648493


def mod(x: int, m: int) -> int:
  """Canonical representative of x in [0, m) for any integer x and positive m."""
  # Python's floor division already corrects negative remainders by adding m
  return x % m

def expmod(b: int, e: int, m: int) -> int:
  """
  Modular exponentiation b**e mod m for non-negative e.

  A negative base is raised as |b| and the sign restored afterwards, so the
  result is always canonical.
  """
  if e < 0: raise ValueError(f"Negative exponent {e} not supported")
  raw = pow(abs(b), e, m)
  if b >= 0 or e & 1 == 0 or raw == 0: return raw
  return m - raw

def inv(x: int) -> int:
  """
  Inverse mod p by Fermat's little theorem.

  Precondition (unchecked): x is not 0 mod p, and inv(0) simply returns 0.
  Point addition never divides by zero because d is not a square.
  """
  return expmod(x, p - 2, p)


class fe:
  """A prime field element modulo p = 2^255 - 19"""

  def __init__(self, x: int): self.val = mod(x, p)
  def __hash__(self): return self.val
  def __repr__(self): return value_name(self)
  def __str__(self): return bytes(self).hex()
  def __bytes__(self): return self.val.to_bytes(32, 'little')
  def bit(self, n: int): return bool(self.val & 1 << n)

  def __eq__(self, other):
    # Note: if we return NotImplemented, Python does object comparison and returns False
    if not isinstance(other, fe): raise TypeError(f"Cannot compare fe with {other!r}")
    return self.val == other.val

  def __neg__(self): return fe(-self.val)
  def __add__(self, o: fe): return fe(self.val + o.val)
  def __sub__(self, o: fe): return fe(self.val - o.val)
  def __mul__(self, o: fe): return fe(self.val * o.val)

  def __truediv__(self, o: fe) -> fe:
    """Division mod p"""
    return self if o == one else fe(self.val * o.inv.val)

  def __pow__(self, s: int) -> fe:
    # Use faster cached .sq for x**2 because it is a very common operation
    return self.sq if s == 2 else fe(expmod(self.val, s, p))

  @cached_property
  def inv(self) -> fe: return fe(inv(self.val))

  @cached_property
  def sq(self) -> fe:
    """Squared"""
    return self * self

  @cached_property
  def is_odd(self) -> bool: return self.bit(0)


zero, one, minus1 = fe(0), fe(1), fe(-1)

# Square root of -1, used when the first square root candidate fails
sqrtm1 = fe(expmod(2, p4, p))
assert sqrtm1 * sqrtm1 == minus1


def value_name(s: fe) -> str:
  """Return variable names rather than fe(...) for any constants defined here"""
  for name, val in globals().items():
    if isinstance(val, fe) and s == val:
      return name
  for name, val in globals().items():
    if isinstance(val, fe) and s == -val:
      return f"-{name}"
  return f"fe({s.val})"
