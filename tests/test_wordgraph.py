import pytest

from abbrase.exceptions import BoundsError, NotEnoughPrefixesError, TooManyPrefixesError, WordGraphError
from abbrase.wordgraph import PREFIXES, WordGraph, prefix
from conftest import PREFIXES as TEST_PREFIXES


def test_prefix():
  assert prefix("Hello") == "hel"
  assert prefix("AB") == "ab"


def test_load(graphfile, words, encode):
  words = [*words, "AAAlso", "BNJoy"]
  g = WordGraph.open(graphfile(words, {0: [1, 2], 5: [1, 1025, 1026]}))
  assert len(g) == 1027
  assert len(g.prefixes) == PREFIXES
  assert g.word(1) == "aaaly"
  assert g.word(1026) == "BNJoy"
  assert g.prefixes[0] == "aaa"
  assert g.prefixes[1023] == TEST_PREFIXES[1023]
  # Prefixes are case insensitive and words keep their ids in buckets
  assert g.bucket(0) == [1, 1025]
  assert g.bucket(5) == [6]
  assert g.buckets["bnj"] == [1024, 1026]
  assert g.followers(0) == [1, 2]
  assert g.followers(5) == [1, 1025, 1026]
  assert g.followers(1) == []
  assert g.followers_compressed[5] == encode([1, 1025, 1026])


def test_bounds(graphfile, words):
  g = WordGraph.open(graphfile(words))
  with pytest.raises(BoundsError):
    g.word(0)  # The reserved id has no word
  with pytest.raises(BoundsError):
    g.word(1025)
  with pytest.raises(BoundsError):
    g.followers(1025)
  with pytest.raises(BoundsError):
    g.bucket(1024)


def test_not_enough_prefixes(graphfile, words):
  with pytest.raises(NotEnoughPrefixesError) as exc:
    WordGraph.open(graphfile(words[:-1]))
  assert "not enough prefixes" in str(exc.value)
  assert exc.value.exitcode == 3
  # Repeating a prefix doesn't help
  with pytest.raises(NotEnoughPrefixesError):
    WordGraph.open(graphfile([*words[:-1], "aaaah"]))


def test_too_many_prefixes(graphfile, words):
  with pytest.raises(TooManyPrefixesError) as exc:
    WordGraph.open(graphfile([*words, f"{TEST_PREFIXES[1024]}ly"]))
  assert "too many prefixes" in str(exc.value)
  assert exc.value.exitcode == 2
  assert isinstance(exc.value, WordGraphError)


def test_corrupted(tmp_path, graphtext, words):
  fname = tmp_path / "graph.txt"
  text = graphtext(words)

  def load(data):
    fname.write_text(data, encoding="utf-8")
    with pytest.raises(WordGraphError) as exc:
      WordGraph.open(fname)
    assert exc.value.exitcode == 1
    return str(exc.value)

  assert "invalid word count" in load("many\n" + text.split("\n", 1)[1])
  assert "invalid word count" in load("")
  assert "invalid word count" in load("0\n")
  assert "truncated" in load(text[:-1])  # Missing final newline
  assert "truncated" in load(text.rsplit("\n", 3)[0] + "\n")  # Missing lines
  assert "word 3 is empty" in load(text.replace("\naacly\n", "\n\n"))


def test_prefix_errors_come_first(tmp_path, words):
  # Not enough prefixes is reported even when the adjacency lists are missing
  fname = tmp_path / "graph.txt"
  fname.write_text("\n".join([str(len(words)), *words[:-1]]) + "\n")
  with pytest.raises(NotEnoughPrefixesError):
    WordGraph.open(fname)


def test_open_missing(tmp_path):
  with pytest.raises(WordGraphError) as exc:
    WordGraph.open(tmp_path / "nonexistent.txt")
  assert "unable to open" in str(exc.value)
  assert exc.value.exitcode == 1


def test_followers_length_mismatch(words):
  with pytest.raises(WordGraphError):
    WordGraph(words, [""] * len(words))
  g = WordGraph(words, [""] * (len(words) + 1))
  assert g.bucket(1023) == [1024]
