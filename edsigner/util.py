from typing import Tuple

from .exceptions import InvalidKeyFormat


def clamp(x: int) -> int:
  """Ed25519/X25519 standard clamping for scalars (from hashed secret key)"""
  # 256 bits 01[x]000  (using 251 bits of x, masking on/off others)
  return x & (1 << 255) - 8 | 1 << 254


def isbytes(x) -> bool:
  return isinstance(x, (bytes, bytearray, memoryview))

def toint(x) -> int:
  if isinstance(x, int): return x
  if not isbytes(x) or len(x) != 32: raise InvalidKeyFormat("Should be exactly 32 bytes")
  return int.from_bytes(x, "little")

def tointsign(x) -> Tuple[int, bool]:
  """Separate the 255 bit integer and its high bit as a sign, return both."""
  val = toint(x)
  sign = val & 1 << 255
  return val ^ sign, bool(sign)

def tobytes(x: int) -> bytes:
  return x.to_bytes(32, "little")

def hashint(digest: bytes) -> int:
  """A hash digest of any length as a little endian integer"""
  return int.from_bytes(digest, "little")
