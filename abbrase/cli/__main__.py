import sys
from typing import NoReturn

import colorama

from abbrase.cli.args import argparse
from abbrase.cli.gen import main_gen
from abbrase.exceptions import BoundsError, RandomSourceError, WordGraphError


def main() -> NoReturn:
  """
  The main CLI entry point.

  System exit codes:
  * 0 Passwords were generated successfully
  * 1 The word graph file cannot be opened or is corrupt
  * 2 Too many distinct prefixes in the word graph
  * 3 Not enough distinct prefixes in the word graph
  * 4 I/O error (broken pipe)
  * 5 Unable to open the secure random source
  * 6 Unable to read enough random numbers
  * 7 Interrupted
  * 10 Internal error (report a bug)

  :raises SystemExit: on normal exit or any expected error, including KeyboardInterrupt
  :raises Exception: on unexpected error (report a bug), or on any error with `--debug`
  """
  colorama.init()
  args = argparse()
  if args.debug:
    main_gen(args)  # --debug makes us not catch errors
    sys.exit(0)
  try:
    main_gen(args)
  except (WordGraphError, RandomSourceError, BoundsError) as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(e.exitcode)
  except BrokenPipeError:
    sys.stderr.write('I/O error (broken pipe)\n')
    sys.exit(4)
  except KeyboardInterrupt:
    sys.stderr.write("Interrupted.\n")
    sys.exit(7)
  sys.exit(0)

if __name__ == "__main__":
  main()
