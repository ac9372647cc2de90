from typing import NamedTuple

from abbrase.entropy import draw_prefixes
from abbrase.intset import IntSet, intersect

BITS_PER_WORD = 10  # log2 of the number of prefixes


class Passphrase(NamedTuple):
  password: str
  word_ids: list
  words: list
  mismatches: list  # Boundaries i where word i has no link to word i + 1


def entropy_bits(length: int) -> int:
  return BITS_PER_WORD * length


class Generator:
  """Turn random prefixes into passwords with a memorable phrase of words.

  Each word is picked from the bucket of its prefix, preferring words that
  may follow the previous word in natural text. The randomness is all in the
  choice of prefixes, so picking the words does not reduce entropy.
  """

  def __init__(self, graph, source, start_word=0):
    self.graph = graph
    self.source = source
    self.start_word = start_word

  def generate(self, length: int) -> Passphrase:
    return self.build(draw_prefixes(self.source, length))

  def build(self, chosen) -> Passphrase:
    """Build a passphrase from already chosen prefix bucket indices."""
    g = self.graph
    word_sets, mismatches = self.constrain([g.bucket(c).copy() for c in chosen])
    word_ids = self.select(word_sets)
    return Passphrase(
      password="".join(g.prefixes[c] for c in chosen),
      word_ids=word_ids,
      words=[g.word(w) for w in word_ids],
      mismatches=mismatches,
    )

  def constrain(self, word_sets):
    """Working backwards, keep only the words with a link to a word in the next set.

    Where none of the words link forward, the set is kept as it was and the
    boundary is recorded as a mismatch.
    """
    filtered, mismatches = [], []
    next_words = None
    for i in reversed(range(len(word_sets))):
      words = word_sets[i]
      if next_words is not None:
        linked = IntSet(w for w in words if len(intersect(self.graph.followers(w), next_words)))
        if len(linked):
          words = linked
        else:
          mismatches.append(i)
      filtered.append(words)
      next_words = words
    filtered.reverse()
    mismatches.reverse()
    return filtered, mismatches

  def select(self, word_sets) -> list:
    """Working forwards, pick the lowest (most common) word that may follow the previous one."""
    last_word = self.start_word
    chosen = []
    for words in word_sets:
      linked = intersect(words, self.graph.followers(last_word))
      last_word = (linked if len(linked) else words).get(0)
      chosen.append(last_word)
    return chosen
