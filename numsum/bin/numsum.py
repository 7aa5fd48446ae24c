#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Sum space and/or newline delimited numbers and print the result.'

from sys import argv
from typing import Sequence

from ..exceptions import NumSumError
from ..io import acquire_text, outL
from ..parse import fmt_sum, parse_and_sum
from ..resolve import Help, resolve


HELP_MENU = '''
Sums up space and/or newline delimited numbers (both integers and decimals) and prints the result to stdout.
Input can be from stdin (no arguments), a file (-f flag), or the arguments themselves.
Note: Commas in the numbers are allowed.

usage:
  numsum                  read numbers from stdin.
  numsum '1 2,000 3.5'    sum the numbers in the arguments.
  numsum -f <path>        read numbers from the file at <path>.
  numsum -h               print this help menu.
'''


def print_help() -> None:
  outL(HELP_MENU)


def main(args:Sequence[str]|None=None) -> None:
  if args is None: args = argv
  try:
    mode = resolve(args)
    if isinstance(mode, Help):
      print_help()
      return
    total = parse_and_sum(acquire_text(mode))
  except NumSumError as e:
    exit(f'numsum error: {e}')
  outL(fmt_sum(total))


if __name__ == '__main__': main()
