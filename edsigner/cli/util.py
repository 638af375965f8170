import sys
from pathlib import Path


def unhex(s: str, what: str) -> bytes:
  """Parse a key or signature given in hex on the command line."""
  try:
    return bytes.fromhex(s.strip())
  except ValueError:
    raise ValueError(f"Invalid hex string for {what}") from None

def read_message(args) -> bytes:
  """The message from the single file argument or stdin."""
  if len(args.files) > 1:
    raise ValueError("Only one message file may be specified")
  fn = args.files[0] if args.files else True
  if fn is True:
    return sys.stdin.buffer.read()
  return Path(fn).read_bytes()
