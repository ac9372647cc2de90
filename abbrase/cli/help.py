import sys
from typing import NoReturn

import abbrase

T = "\x1B[1;44m"  # titlebar (white on blue)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

introduction = f"Abbrase {abbrase.__version__} - Abbreviated passphrases with memorable mnemonics"

usage = f"""\
{C}abbrase {D}[{N}length{D}] [{N}count{D}] [{N}hook{D}]{N}
"""

usagetext = f"""\
Generate passwords made of three-letter word prefixes, each with a phrase of
common words that begin with those prefixes to help remember it.

  length            Number of words, 10 bits of entropy each (default 5)
  count             Number of passwords to generate (default 32)
  hook              Start every phrase after the known word closest to this
  {F}--debug{N}           Report broken links between words, show tracebacks
  {F}--help --version{N}  Useful information

The first positive number given is the length and the second is the count.
Anything else is taken as the hook word. The word graph is read from
{F}$ABBRASE_WORDGRAPH{N}, or wordlist_bigrams.txt in the current directory or the
abbrase data directory.
"""


def print_help(error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if stream.isatty():
    stream.write(f"{T}{introduction:78}{N}\n")
  else:
    stream.write(f"{introduction}\n")
  stream.write(f"{usage}\n{usagetext}")
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)


def print_version() -> NoReturn:
  print(f"Abbrase {abbrase.__version__}")
  sys.exit(0)
