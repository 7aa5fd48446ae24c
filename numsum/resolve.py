# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Input mode resolution from the process argument vector.
'''

from dataclasses import dataclass
from typing import Sequence

from .exceptions import MissingArgument


@dataclass(frozen=True)
class InputMode:
  'Base class of the input modes; exactly one is selected per run.'


@dataclass(frozen=True)
class Stdin(InputMode):
  'Read the numbers from std in.'


@dataclass(frozen=True)
class Literal(InputMode):
  'The numbers were passed directly as command line text.'
  text:str


@dataclass(frozen=True)
class File(InputMode):
  'Read the numbers from the file at `path`.'
  path:str


@dataclass(frozen=True)
class Help(InputMode):
  'Print the help menu instead of summing.'


def resolve(args:Sequence[str]) -> InputMode:
  '''
  Select the input mode for the full argument vector `args`; `args[0]` is the program name and is ignored.
  `-h` and `-f` are only recognized as the first argument.
  Otherwise all arguments are joined with single spaces to form the literal text,
  so that `numsum 1 2 3` and `numsum '1 2 3'` are equivalent.
  '''
  rest = list(args[1:])
  if not rest: return Stdin()
  first = rest[0]
  if first == '-h': return Help()
  if first == '-f':
    if len(rest) < 2: raise MissingArgument('Missing path to file.')
    return File(rest[1])
  return Literal(' '.join(rest))
