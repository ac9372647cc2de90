from abbrase.exceptions import BoundsError


class IntSet:
  """Ordered sequence of non-negative integers (word ids)."""

  def __init__(self, values=()):
    self._data = list(values)

  def append(self, value: int):
    self._data.append(value)

  def get(self, pos: int) -> int:
    if not 0 <= pos < len(self._data):
      raise BoundsError(f"invalid vector index {pos} not in [0, {len(self._data)})")
    return self._data[pos]

  def copy(self):
    return IntSet(self._data)

  def __len__(self):
    return len(self._data)

  def __iter__(self):
    return iter(self._data)

  def __contains__(self, value):
    return value in self._data

  def __eq__(self, other):
    if isinstance(other, IntSet):
      return self._data == other._data
    if isinstance(other, (list, tuple)):
      return self._data == list(other)
    return NotImplemented

  def __repr__(self):
    return f"IntSet({self._data!r})"


def intersect(a: IntSet, b: IntSet) -> IntSet:
  """Return the values common to a and b. Both must be sorted ascending."""
  ret = IntSet()
  a, b = list(a), list(b)
  ai = bi = 0
  while ai < len(a) and bi < len(b):
    if a[ai] == b[bi]:
      ret.append(a[ai])
      ai += 1
      bi += 1
    elif a[ai] < b[bi]:
      ai += 1
    else:
      bi += 1
  return ret
