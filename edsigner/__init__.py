# A plain Python implementation of Ed25519 signatures and the conversion of
# Ed25519 keys to Curve25519 (X25519) keys for key exchange.

# Formulas follow the Ed25519 paper and RFC 8032.
# https://ed25519.cr.yp.to/ed25519-20110926.pdf
# https://datatracker.ietf.org/doc/html/rfc8032

# Not constant time, not zeroing buffers after use. Any secret-bearing use that
# needs side channel resistance should prefer libsodium.

# The hash function is chosen once on import by the EDSIGNER_HASH environment
# variable (SHA-512 if unset). Construct Ed25519(hashfn) for anything else.

from . import hashing
from .exceptions import Ed25519Error, InvalidArgument, InvalidKeyFormat, InvalidPoint
from .scheme import Ed25519

__version__ = "1.3.0"

default = Ed25519(hashing.configured())

generate_key_pair = default.generate_key_pair
derive_public_key = default.derive_public_key
signature = default.signature
valid_signature = default.valid_signature
on_curve = default.on_curve
to_curve25519 = default.to_curve25519
