from .ed import decodepoint
from .eddsa import secret_scalar
from .exceptions import InvalidArgument
from .hashing import HashFn, sha512
from .util import tobytes

# Birational map between Ed25519 and Curve25519 (Montgomery) keys:
#   u = (1 + y) / (1 - y)
# Secret keys need no mapping at all because both curves use the same
# clamped scalar, only the Ed25519 seed hashing must be done first.

WHICH = "secret", "public"


def to_curve25519(key: bytes, which: str, hashfn: HashFn = sha512) -> bytes:
  """
  Convert an Ed25519 key to X25519 for key exchange.

  A 64-byte secret is read as libsodium's seed + public key, only the seed is used.

  :param which: "secret" for a 32-byte seed or "public" for a compressed point
  :raises InvalidKeyFormat: on a key of wrong length
  :raises InvalidPoint: if a public key is not on the curve
  :raises InvalidArgument: if which is something else, or the hash is too short
  """
  if which == "public":
    return decodepoint(key).montbytes
  if which == "secret":
    return tobytes(secret_scalar(key, hashfn))
  raise InvalidArgument(f"Key type should be one of {WHICH}, not {which!r}")
