from typing import Optional, Tuple

from . import ed, eddsa, mont
from .hashing import HashFn, sha512


class Ed25519:
  """
  Ed25519 operations bound to one hash function.

  The hash is fixed when the object is created and passed explicitly to the
  signing, verification and conversion functions, so instances are safe to
  share between threads. The package level functions use an instance created
  on import from the EDSIGNER_HASH environment variable.
  """

  def __init__(self, hashfn: HashFn = sha512):
    self.hashfn = hashfn

  def __repr__(self):
    return f"Ed25519[{getattr(self.hashfn, '__name__', self.hashfn)}]"

  def generate_key_pair(self, secret: Optional[bytes] = None) -> Tuple[bytes, bytes]:
    """Return (secret, public), with a random secret unless one is given."""
    return eddsa.generate_key_pair(secret, self.hashfn)

  def derive_public_key(self, secret: bytes) -> bytes:
    return eddsa.derive_public_key(secret, self.hashfn)

  def signature(self, message: bytes, secret: bytes, public: Optional[bytes] = None) -> bytes:
    """Sign a message. If only the secret key is given, the public key is derived (slower)."""
    return eddsa.ed_sign(message, secret, public, self.hashfn)

  def valid_signature(self, signature: bytes, message: bytes, public: bytes) -> bool:
    return eddsa.ed_verify(signature, message, public, self.hashfn)

  @staticmethod
  def on_curve(key: bytes) -> bool:
    return ed.on_curve(key)

  def to_curve25519(self, key: bytes, which: str) -> bytes:
    return mont.to_curve25519(key, which, self.hashfn)
