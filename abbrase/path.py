import os
from pathlib import Path

from xdg import xdg_data_home

GRAPHNAME = "wordlist_bigrams.txt"
datadir = xdg_data_home() / "abbrase"


def wordgraph_path() -> Path:
  """Word graph file: $ABBRASE_WORDGRAPH, else the current directory, else the data dir."""
  if env := os.environ.get("ABBRASE_WORDGRAPH"):
    return Path(env)
  local = Path(GRAPHNAME)
  if local.exists():
    return local
  return datadir / GRAPHNAME
