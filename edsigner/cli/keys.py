import edsigner
from edsigner.cli.util import unhex


def main_keygen(args):
  seed = unhex(args.secret, "seed") if args.secret else None
  sk, pk = edsigner.generate_key_pair(seed)
  print(f"secret {sk.hex()}")
  print(f"public {pk.hex()}")


def main_pubkey(args):
  if not args.secret:
    raise ValueError("A secret key is required (-s)")
  print(edsigner.derive_public_key(unhex(args.secret, "secret key")).hex())


def main_x25519(args):
  if bool(args.secret) == bool(args.public):
    raise ValueError("Give exactly one key to convert, either -s secret or -k public")
  if args.secret:
    key = edsigner.to_curve25519(unhex(args.secret, "secret key"), "secret")
  else:
    key = edsigner.to_curve25519(unhex(args.public, "public key"), "public")
  print(key.hex())
