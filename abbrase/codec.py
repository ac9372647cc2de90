from abbrase.exceptions import WordGraphError
from abbrase.intset import IntSet

RUN = 0x60  # Characters from here up are runs of consecutive ids
CONTINUE = 0x20  # More base-32 digits follow
DIGIT = 0x1F


def decode(enc: str) -> IntSet:
  """Decode a compressed adjacency list into ascending word ids.

  The encoder stores the gaps between consecutive ids minus one, so that a
  list like [1, 2, 3, 5, 80] becomes [0, 0, 0, 1, 74]. Runs of zeros are
  contracted into a single character 0x60 + (run length - 1), and the other
  numbers are written as base-32 varints with the lowest digit first, bit 0x20
  marking that another digit follows. The example encodes as "bA*B".
  """
  dec = IntSet()
  last = pos = zero_run = 0
  while pos < len(enc) or zero_run:
    delta = 0
    if zero_run:
      zero_run -= 1
    elif ord(enc[pos]) >= RUN:
      zero_run = ord(enc[pos]) & DIGIT
      pos += 1
    else:
      shift = 0
      while True:
        if pos >= len(enc):
          raise WordGraphError(f"corrupted wordgraph file: truncated adjacency list {enc!r}")
        val = ord(enc[pos])
        delta |= (val & DIGIT) << shift
        shift += 5
        pos += 1
        if not val & CONTINUE:
          break
    last += delta + 1
    dec.append(last)
  return dec
