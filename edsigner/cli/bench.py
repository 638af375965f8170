from secrets import token_bytes
from time import perf_counter

from tqdm import tqdm

import edsigner


def main_bench(args):
  rounds = int(args.rounds) if args.rounds else 20
  if rounds < 1:
    raise ValueError("At least one round is needed")
  msg = token_bytes(1000)
  keytotal = signtotal = verifytotal = 0.0

  with tqdm(total=rounds, delay=1.0, ncols=78, unit="round", bar_format="{l_bar}         {bar}{r_bar}") as progress:
    for i in range(rounds):
      t0 = perf_counter()
      sk, pk = edsigner.generate_key_pair()
      t1 = perf_counter()
      sig = edsigner.signature(msg, sk, pk)
      t2 = perf_counter()
      if not edsigner.valid_signature(sig, msg, pk):
        raise ValueError("Benchmark signature failed verification")
      t3 = perf_counter()
      keytotal += t1 - t0
      signtotal += t2 - t1
      verifytotal += t3 - t2
      progress.update(1)

  print(f"Ran {rounds} rounds using {edsigner.default!r}, each with a new key pair and a 1000 byte message.\n")
  print(f"Key generation {1e3 * keytotal / rounds:8.1f} ms")
  print(f"Signing        {1e3 * signtotal / rounds:8.1f} ms")
  print(f"Verification   {1e3 * verifytotal / rounds:8.1f} ms")
