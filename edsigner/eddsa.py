from secrets import token_bytes
from typing import Optional, Tuple

from .ed import G, decodepoint
from .exceptions import InvalidArgument, InvalidKeyFormat
from .field import q
from .hashing import MIN_DIGEST, HashFn, sha512
from .util import clamp, hashint, isbytes, tobytes, toint


def secret_scalar(edsk: bytes, hashfn: HashFn = sha512) -> int:
  """
  Converts Ed25519 secret key bytes to a clamped scalar.

  Note:
    Public key is secret_scalar(edsk) * G  (for both Edwards and Montgomery)
    Curve25519 sk = tobytes(secret_scalar(edsk))
  """
  return clamp(toint(_seedhash(edsk, hashfn)[:32]))

def _seedhash(edsk: bytes, hashfn: HashFn) -> bytes:
  # Sodium concatenates the public key, making it 64 bytes
  if not isbytes(edsk) or len(edsk) not in (32, 64): raise InvalidKeyFormat("Invalid length for edsk")
  h = hashfn(bytes(edsk[:32]))
  if len(h) < MIN_DIGEST:
    raise InvalidArgument(f"Hash function gave {len(h)} bytes, at least {MIN_DIGEST} needed")
  return h


def derive_public_key(edsk: bytes, hashfn: HashFn = sha512) -> bytes:
  """
  Standard Ed25519 public key of a 32-byte secret seed.

  A 64-byte secret is read as libsodium's seed + public key, only the seed is used.
  """
  return bytes(secret_scalar(edsk, hashfn) * G)

def generate_key_pair(edsk: Optional[bytes] = None, hashfn: HashFn = sha512) -> Tuple[bytes, bytes]:
  """Return (edsk, edpk), using a random secret unless one is given."""
  edsk = token_bytes(32) if edsk is None else bytes(edsk)
  return edsk, derive_public_key(edsk, hashfn)


def ed_sign(msg: bytes, edsk: bytes, edpk: Optional[bytes] = None, hashfn: HashFn = sha512) -> bytes:
  """
  Standard Ed25519 signature.

  Deriving edpk when it is not given costs an extra scalar multiplication.
  The provided edpk is trusted to match edsk.
  """
  if edpk is None: edpk = derive_public_key(edsk, hashfn)
  h = _seedhash(edsk, hashfn)
  a = clamp(toint(h[:32]))
  # The nonce is deliberately not reduced mod q, scalarmult accepts any size
  r = hashint(hashfn(h[32:64] + msg))
  Rs = bytes(r * G)
  k = hashint(hashfn(Rs + edpk + msg))
  s = (r + k * a) % q
  return Rs + tobytes(s)

def ed_verify(signature: bytes, msg: bytes, edpk: bytes, hashfn: HashFn = sha512) -> bool:
  """
  Standard Ed25519 signature verification.

  A signature or key of the wrong size is simply not valid (False). Point
  encodings of the right size that are not on the curve, either the key or
  the R part of the signature, raise InvalidPoint instead.
  """
  if not isbytes(signature) or not isbytes(edpk): return False
  if len(signature) != 64 or len(edpk) != 32: return False
  signature, edpk = bytes(signature), bytes(edpk)
  Rs = signature[:32]
  R = decodepoint(Rs)
  A = decodepoint(edpk)
  s = toint(signature[32:])
  # Hash R as received (RFC 8032), not its re-encoding which differs if non-canonical
  k = hashint(hashfn(Rs + edpk + msg))
  return s * G == R + k * A
