import sys

import edsigner
from edsigner.cli.util import read_message, unhex


def main_sign(args):
  if not args.secret:
    raise ValueError("A secret key is required (-s)")
  sk = unhex(args.secret, "secret key")
  pk = unhex(args.public, "public key") if args.public else None
  msg = read_message(args)
  print(edsigner.signature(msg, sk, pk).hex())


def main_verify(args):
  if not args.public or not args.signature:
    raise ValueError("Both the public key (-k) and the signature (-S) are required")
  pk = unhex(args.public, "public key")
  sig = unhex(args.signature, "signature")
  msg = read_message(args)
  if not edsigner.valid_signature(sig, msg, pk):
    raise ValueError("Signature mismatch")
  sys.stderr.write(" ✅  Signature OK\n")
