import sys

from zxcvbn.time_estimates import display_time

from abbrase.entropy import random_source
from abbrase.generator import Generator, entropy_bits
from abbrase.nearest import find_nearest
from abbrase.path import wordgraph_path
from abbrase.wordgraph import PREFIX_LEN, WordGraph

GUESSES_PER_SECOND = 1e10  # Offline attack on a fast hash


def crack_time(bits: int) -> str:
  # Anything past a few hundred bits is "centuries" anyway, and floats overflow
  return display_time(2.0**min(bits, 500) / GUESSES_PER_SECOND)


def main_gen(args):
  graph = WordGraph.open(wordgraph_path())
  start_word = find_nearest(graph, args.hook) if args.hook is not None else 0
  bits = entropy_bits(args.length)
  tty = sys.stdout.isatty()
  with random_source() as source:
    print(f"Generating {args.count} passwords with {bits} bits of entropy")
    print(f"Estimated time to hack: {crack_time(bits)}")
    if start_word:
      print(f"    hook: {graph.word(start_word)}")
    hook = f" {graph.word(start_word)}" if start_word else ""
    pass_len = PREFIX_LEN * args.length
    header = f"{'Password':{pass_len}}    Mnemonic"
    print(f"\x1B[1m{header}\x1B[0m" if tty else header)
    print(f"{'-' * pass_len}    {'-' * 4 * args.length}")

    gen = Generator(graph, source, start_word)
    for i in range(args.count):
      p = gen.generate(args.length)
      print(f"{p.password}   {hook} {' '.join(p.words)}")
      if args.debug:
        for b in p.mismatches:
          sys.stderr.write(f"link mismatch at {b + 1}/{args.length} for {p.password}\n")
