from secrets import token_bytes

import nacl.bindings as sodium
import pytest
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

import edsigner
from edsigner import InvalidArgument, InvalidKeyFormat, InvalidPoint
from edsigner.ed import G, ZERO, decodepoint
from edsigner.mont import to_curve25519

EDSK = bytes.fromhex("F43E30C8B167E486D8354701697F2ED238261172AB53521D6A733AB2EDD50AE2")
XSK = bytes.fromhex("D04B301D42D453F5283313D596D84160A5CEFF8CB30AD75C869B1E50E568684C")
EDPK = bytes.fromhex("4637AA90BD31DCA7E271960F358A9C27E6D34DC364AE7070CC099A13A5468550")
XPK = bytes.fromhex("4691577CA17D1774B4792C1E29CE2B58F14B68410CD7697B3EE2E47C6A6F2730")


def test_vectors():
  assert edsigner.to_curve25519(EDSK, "secret") == XSK
  assert edsigner.to_curve25519(EDPK, "public") == XPK


def test_vs_sodium():
  edpk, edsk = sodium.crypto_sign_keypair()
  sk = to_curve25519(edsk[:32], "secret")
  pk = to_curve25519(edpk, "public")
  assert sk == sodium.crypto_sign_ed25519_sk_to_curve25519(edsk)
  assert pk == sodium.crypto_sign_ed25519_pk_to_curve25519(edpk)
  assert pk == sodium.crypto_scalarmult_base(sk)
  # Clamped: low three bits and the high bit clear, bit 254 set
  assert sk[0] & 7 == 0
  assert sk[31] & 0xC0 == 0x40


def test_vs_cryptography():
  sk, pk = edsigner.generate_key_pair()
  xsk = edsigner.to_curve25519(sk, "secret")
  xpk = edsigner.to_curve25519(pk, "public")
  key = X25519PrivateKey.from_private_bytes(xsk)
  assert key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw) == xpk
  # Key exchange between two converted key pairs
  sk2, pk2 = edsigner.generate_key_pair()
  key2 = X25519PrivateKey.from_private_bytes(edsigner.to_curve25519(sk2, "secret"))
  shared1 = key.exchange(key2.public_key())
  shared2 = key2.exchange(key.public_key())
  assert shared1 == shared2


def test_mont_coordinate():
  assert G.montbytes == (9).to_bytes(32, "little")
  # The neutral element has no birational mapping, inv(0) == 0 makes it zero
  assert to_curve25519(bytes(ZERO), "public") == bytes(32)
  # The sign of x is lost in conversion
  P = edsigner.derive_public_key(token_bytes(32))
  Pneg = bytes(-decodepoint(P))
  assert to_curve25519(P, "public") == to_curve25519(Pneg, "public")


def test_errors(offcurve):
  with pytest.raises(InvalidPoint):
    edsigner.to_curve25519(offcurve, "public")
  with pytest.raises(InvalidKeyFormat):
    edsigner.to_curve25519(b"", "public")
  with pytest.raises(InvalidKeyFormat):
    edsigner.to_curve25519(EDPK[:31], "public")
  with pytest.raises(InvalidKeyFormat):
    edsigner.to_curve25519(b"", "secret")
  with pytest.raises(InvalidArgument) as exc:
    edsigner.to_curve25519(EDPK, "private")
  assert "'private'" in str(exc.value)
  # All are ValueErrors
  with pytest.raises(ValueError):
    edsigner.to_curve25519(EDPK, None)
