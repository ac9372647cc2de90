from itertools import islice, product
from string import ascii_lowercase

import pytest

# 1025 distinct prefixes: aaa, aab, ..., the last one is one too many
PREFIXES = ["".join(p) for p in islice(product(ascii_lowercase, repeat=3), 1025)]


def encode_followers(ids):
  """Companion encoder of abbrase.codec.decode, for building test data."""
  out, last = [], 0
  deltas = []
  for i in ids:
    deltas.append(i - last - 1)
    last = i
  pos = 0
  while pos < len(deltas):
    if deltas[pos] == 0:
      run = 1
      while run < 31 and pos + run < len(deltas) and deltas[pos + run] == 0:
        run += 1
      out.append(chr(0x60 + run - 1))
      pos += run
      continue
    d = deltas[pos]
    while d >= 32:
      out.append(chr(0x20 | d & 0x1F))
      d >>= 5
    out.append(chr(0x40 | d))
    pos += 1
  return "".join(out)


@pytest.fixture
def encode():
  return encode_followers


@pytest.fixture
def words():
  """One word per prefix, so that bucket k holds only word id k + 1."""
  return [f"{p}ly" for p in PREFIXES[:1024]]


@pytest.fixture
def graphtext():
  def make(words, followers=None):
    followers = followers or {}
    n = len(words) + 1
    lines = [str(n), *words, *(encode_followers(sorted(followers.get(i, ()))) for i in range(n))]
    return "\n".join(lines) + "\n"
  return make


@pytest.fixture
def graphfile(tmp_path, graphtext):
  def make(words, followers=None):
    fname = tmp_path / "wordlist_bigrams.txt"
    fname.write_text(graphtext(words, followers), encoding="utf-8")
    return fname
  return make
