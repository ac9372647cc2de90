from abbrase.codec import decode
from abbrase.exceptions import BoundsError, NotEnoughPrefixesError, TooManyPrefixesError, WordGraphError
from abbrase.intset import IntSet

PREFIXES = 1024
PREFIX_LEN = 3


def prefix(word: str) -> str:
  return word[:PREFIX_LEN].lower()


def build_index(words):
  """Group word ids 1, 2, ... by prefix. Returns (prefixes, buckets)."""
  prefixes = []  # Bucket index to prefix, in order of first appearance
  buckets = {}
  for i, word in enumerate(words, 1):
    p = prefix(word)
    bucket = buckets.get(p)
    if bucket is None:
      if len(buckets) == PREFIXES:
        raise TooManyPrefixesError("corrupted wordgraph file: too many prefixes")
      bucket = buckets[p] = IntSet()
      prefixes.append(p)
    bucket.append(i)
  if len(buckets) != PREFIXES:
    raise NotEnoughPrefixesError("corrupted wordgraph file: not enough prefixes")
  return prefixes, buckets


class WordGraph:
  """Words, their followers in a bigram corpus, and words grouped by prefix.

  Word id 0 is reserved (no word). Lower ids are more common words.
  """

  def __init__(self, words, followers, index=None):
    self.words = [None, *words]
    self.followers_compressed = list(followers)
    if len(self.followers_compressed) != len(self.words):
      raise WordGraphError(
        f"corrupted wordgraph file: {len(self.followers_compressed)} adjacency lists for {len(self.words)} words"
      )
    self.prefixes, self.buckets = index or build_index(words)

  @classmethod
  def load(cls, f):
    """Parse a word graph from a text stream."""
    line = f.readline()
    try:
      n_words = int(line)
    except ValueError:
      raise WordGraphError("corrupted wordgraph file: invalid word count") from None
    if n_words < 1:
      raise WordGraphError(f"corrupted wordgraph file: invalid word count {n_words}")
    words = [_readline(f) for i in range(n_words - 1)]
    for i, word in enumerate(words, 1):
      if not word:
        raise WordGraphError(f"corrupted wordgraph file: word {i} is empty")
    # Prefix errors are reported before any problem with the adjacency lists
    index = build_index(words)
    followers = [_readline(f) for i in range(n_words)]
    return cls(words, followers, index)

  @classmethod
  def open(cls, filename):
    try:
      f = open(filename, encoding="utf-8")
    except OSError as e:
      raise WordGraphError(f"unable to open {filename}: {e.strerror}") from None
    with f:
      try:
        return cls.load(f)
      except UnicodeDecodeError:
        raise WordGraphError(f"corrupted wordgraph file: {filename} is not UTF-8") from None

  def __len__(self):
    return len(self.words)

  def word(self, word_id: int) -> str:
    if not 0 < word_id < len(self.words):
      raise BoundsError(f"invalid word id {word_id} not in [1, {len(self.words)})")
    return self.words[word_id]

  def followers(self, word_id: int) -> IntSet:
    """Ids of the words that may follow the given word (0 = start of a phrase)."""
    if not 0 <= word_id < len(self.followers_compressed):
      raise BoundsError(f"invalid word id {word_id} not in [0, {len(self.followers_compressed)})")
    return decode(self.followers_compressed[word_id])

  def bucket(self, index: int) -> IntSet:
    """Word ids sharing the prefix of the given bucket index."""
    if not 0 <= index < len(self.prefixes):
      raise BoundsError(f"invalid prefix index {index} not in [0, {len(self.prefixes)})")
    return self.buckets[self.prefixes[index]]


def _readline(f) -> str:
  line = f.readline()
  if not line.endswith("\n"):
    raise WordGraphError("corrupted wordgraph file: truncated")
  return line[:-1]
