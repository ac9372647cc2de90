import sys

from abbrase.cli.help import print_help, print_version


class Args:

  def __init__(self):
    self.length = 0
    self.count = 0
    self.hook = None
    self.debug = None

  def positional(self, arg):
    """First positive number is the length, second the count, anything else a hook word."""
    if not self.length:
      if (n := positive(arg)):
        self.length = n
        return
    elif not self.count:
      if (n := positive(arg)):
        self.count = n
        return
    # The last hook word given wins
    self.hook = arg


def positive(arg):
  """The value of a positive integer argument, or None."""
  try:
    n = int(arg)
  except ValueError:
    return None
  return n if n > 0 else None


def hasflag(av, *flags):
  """Check for any of the flags but not past --"""
  for a in av:
    if a == '--': return False
    if a in flags: return True
  return False


def argparse():
  # Positional arguments are told apart by type and order, argparse can't do that
  av = sys.argv[1:]
  if hasflag(av, '-h', '--help'):
    print_help()
  if hasflag(av, '-v', '--version'):
    print_version()

  args = Args()
  aiter = iter(av)
  for a in aiter:
    if a == '--':
      # Anything after is positional, even if it looks like a flag
      for a in aiter:
        args.positional(a)
      break
    if a == '--debug':
      args.debug = True
      continue
    args.positional(a)

  args.length = args.length or 5
  args.count = args.count or 32
  return args
