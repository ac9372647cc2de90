from contextlib import contextmanager

from abbrase.exceptions import RandomSourceError, ShortReadError
from abbrase.wordgraph import PREFIXES

RANDOM_DEVICE = "/dev/urandom"
INTSIZE = 4  # Bytes of randomness per prefix


@contextmanager
def random_source(path=None):
  """Open the secure random device for the duration of the block."""
  try:
    f = open(path or RANDOM_DEVICE, "rb", buffering=0)
  except OSError as e:
    raise RandomSourceError(f"unable to get secure random numbers: {e.strerror}") from None
  with f:
    yield f


def draw_prefixes(source, length: int) -> list:
  """Pick length prefix bucket indices uniformly (PREFIXES is a power of two)."""
  size = INTSIZE * length
  try:
    data = source.read(size)
  except OSError as e:
    raise ShortReadError(f"unable to read random numbers: {e.strerror}") from None
  if data is None or len(data) != size:
    raise ShortReadError("unable to read random numbers")
  return [
    int.from_bytes(data[i:i + INTSIZE], "little") & (PREFIXES - 1)
    for i in range(0, size, INTSIZE)
  ]
