class WordGraphError(ValueError):
  """Word graph file cannot be opened or is corrupt"""
  exitcode = 1

class TooManyPrefixesError(WordGraphError):
  """More than 1024 distinct prefixes in the word graph"""
  exitcode = 2

class NotEnoughPrefixesError(WordGraphError):
  """Fewer than 1024 distinct prefixes in the word graph"""
  exitcode = 3

class RandomSourceError(OSError):
  """Secure random numbers are unavailable"""
  exitcode = 5

class ShortReadError(RandomSourceError):
  """The random source returned fewer bytes than requested"""
  exitcode = 6

class BoundsError(IndexError):
  """Internal index out of range (a bug, not a user error)"""
  exitcode = 10
