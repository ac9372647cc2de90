def edit_distance(a: str, b: str) -> int:
  """Levenshtein distance, using memory for one row of the shorter string."""
  # Based on http://hetland.org/coding/python/levenshtein.py
  if len(a) > len(b):
    a, b = b, a
  cost = list(range(len(a) + 1))
  for i, cb in enumerate(b, 1):
    prevdiag, cost[0] = cost[0], i
    for j, ca in enumerate(a, 1):
      sub = prevdiag + (ca != cb)
      prevdiag = cost[j]
      cost[j] = min(cost[j] + 1, cost[j - 1] + 1, sub)
  return cost[-1]


def find_nearest(graph, query: str) -> int:
  """Id of the word closest to query (the first one on ties), 0 if there are no words."""
  best_word, best_dist = 0, None
  for i in range(1, len(graph)):
    dist = edit_distance(query, graph.words[i])
    if best_dist is None or dist < best_dist:
      best_word, best_dist = i, dist
  return best_word
