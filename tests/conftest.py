import itertools

import pytest

from edsigner.field import p
from edsigner.util import tobytes


@pytest.fixture
def offcurve() -> bytes:
  """A 32-byte string that is not a valid point (the y has no matching x)"""
  # Legendre symbol computed directly rather than with the code under test
  D = -121665 * pow(121666, p - 2, p) % p
  for y in itertools.count(2):
    xx = (y * y - 1) * pow(D * y * y + 1, p - 2, p) % p
    if pow(xx, (p - 1) // 2, p) == p - 1:
      return tobytes(y)
