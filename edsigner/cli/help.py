import sys
from typing import NoReturn

import edsigner

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  keygen=f"{C}edsigner {F}keygen {D}[{F}-s {N}seed{D}]{N}\n",
  pubkey=f"{C}edsigner {F}pubkey -s {N}secret\n",
  sign=f"{C}edsigner {F}sign -s {N}secret {D}[{F}-k {N}public{D}] [{N}message.txt{D}]{N}\n",
  verify=f"{C}edsigner {F}verify -k {N}public {F}-S {N}signature {D}[{N}message.txt{D}]{N}\n",
  x25519=f"{C}edsigner {F}x25519 {D}[{F}-s {N}secret {D}|{F} -k {N}public{D}] —{N} convert for key exchange\n",
  bench=f"{C}edsigner {F}bench {D}[{F}-n {N}rounds{D}] —{N} time key generation, signing and verification\n",
)

usagetext = dict(
  keygen=f"""\
Create a new key pair. The secret key is 32 random bytes unless a seed is
given, in which case the matching public key is derived from it.

  {F}-s --seed {N}hex      Use this 32-byte secret instead of a random one
""",
  sign=f"""\
Sign a message read from the given file, or from stdin if no file or {F}-{N} is
given. The signature is printed in hex. Providing the public key saves the
time needed to derive it.

  {F}-s --secret {N}hex    Secret key (32 bytes)
  {F}-k --public {N}hex    Public key matching the secret key (optional)
""",
  verify=f"""\
Verify a signature over a message read from the given file or stdin. Exits
with status 10 if the signature does not match or a key is invalid.

  {F}-k --public {N}hex    Public key of the signer
  {F}-S --signature {N}hex The 64-byte signature
""",
  x25519=f"""\
Convert an Ed25519 key to the Curve25519 key used in X25519 key exchange.
Only one key may be given.

  {F}-s --secret {N}hex    Secret key to convert (prints X25519 secret)
  {F}-k --public {N}hex    Public key to convert (prints X25519 public)
""",
)

cmdhelp = {k: f"{usage[k]}\n{usagetext.get(k, '')}".rstrip("\n") + "\n" for k in usage}

introduction = f"edsigner {edsigner.__version__} - Ed25519 signatures in plain Python"
introduction = f"{T}{introduction:78}{N}\n"

shorthelp = f"""\
{introduction}
{"".join(usage.values())}
Keys and signatures are given and printed as hex. The hash function may be
changed by the {F}EDSIGNER_HASH{N} environment variable (default sha512).

  {F}--debug{N}           Do not catch errors (show the traceback)
  {F}--help --version{N}  Useful information. Help applies to subcommands too.
"""

allcommands = '\n\n'.join(cmdhelp.values())

fullhelp = f"""\
{introduction}
{allcommands}"""

def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: stream.write(shorthelp)
  elif (h := cmdhelp.get(modehelp)): stream.write(h)
  else: stream.write(fullhelp)
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"edsigner {edsigner.__version__}")
  sys.exit(0)
