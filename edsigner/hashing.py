import hashlib
import os
from importlib import import_module
from typing import Callable

from .exceptions import InvalidArgument

HashFn = Callable[[bytes], bytes]

# Environment variable that selects the hash for the package level functions.
# It is read once on import and never again.
ENVVAR = "EDSIGNER_HASH"

# The secret scalar is read from the first 32 bytes of the seed hash
MIN_DIGEST = 32


def sha512(data: bytes) -> bytes:
  """The standard Ed25519 hash"""
  return hashlib.sha512(data).digest()


def resolve(name: str) -> HashFn:
  """
  Find the hash function described by a configuration string.

  Accepted forms:
  * empty or "sha512" for standard Ed25519
  * any hashlib algorithm with a fixed digest of at least 32 bytes, e.g.
    "blake2b" or "sha3_512"
  * "module:function" naming an importable callable bytes -> bytes

  :raises InvalidArgument: if the name cannot be resolved
  """
  name = name.strip()
  if not name or name.lower() == "sha512":
    return sha512
  if ":" in name:
    return _import_callable(name)
  if name.lower() not in hashlib.algorithms_available:
    raise InvalidArgument(f"Unknown hash {name!r}, should be a hashlib algorithm or module:function")
  algo = name.lower()
  size = hashlib.new(algo).digest_size
  if size == 0:
    raise InvalidArgument(f"Hash {name!r} has no fixed digest size")
  if size < MIN_DIGEST:
    raise InvalidArgument(f"Hash {name!r} digest is {size} bytes, at least {MIN_DIGEST} needed")

  def digest(data: bytes) -> bytes:
    return hashlib.new(algo, data).digest()

  digest.__name__ = algo
  return digest


def _import_callable(name: str) -> HashFn:
  modname, _, attrs = name.partition(":")
  try:
    obj = import_module(modname)
    for attr in attrs.split("."):
      obj = getattr(obj, attr)
  except (ImportError, AttributeError) as e:
    raise InvalidArgument(f"Cannot load hash function {name!r}: {e}") from e
  if not callable(obj):
    raise InvalidArgument(f"Hash function {name!r} is not callable")
  return obj


def configured() -> HashFn:
  """The hash selected by the environment (SHA-512 if not set)"""
  return resolve(os.environ.get(ENVVAR, ""))
