# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Tokenizing, parsing and summing of numeric text.

Numbers are single precision (numpy.float32) and are summed strictly left to right,
so results are reproducible despite float addition being non-associative.
'''

import re
from functools import reduce
from typing import Iterable, List

import numpy as np

from .exceptions import ParseError


# Optional sign, then infinity, nan, or a decimal with at least one digit and an optional exponent.
number_re = re.compile(r'[+-]?(?:inf(?:inity)?|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)', re.IGNORECASE | re.ASCII)


def strip_separators(text:str) -> str:
  'Remove thousands separators; commas are never delimiters or decimal points.'
  return text.replace(',', '')


def split_tokens(text:str) -> List[str]:
  '''
  Split `text` into tokens, first on newlines and then on single spaces.
  Runs of spaces are not collapsed: each extra space yields an empty token, which then fails to parse.
  '''
  return [token for line in text.strip().split('\n') for token in line.split(' ')]


def parse_token(token:str) -> np.float32:
  'Parse a single token as a float32; values outside of the float32 range become infinities.'
  if not number_re.fullmatch(token): raise ParseError(token)
  with np.errstate(over='ignore'):
    return np.float32(float(token)) # Rounds through float64 first; rare halfway decimals can round twice.


def parse_numbers(text:str) -> List[np.float32]:
  'Parse all of the numbers in `text`; the first invalid token aborts the whole parse.'
  return [parse_token(token) for token in split_tokens(strip_separators(text))]


def sum_numbers(values:Iterable[np.float32]) -> np.float32:
  'Sum `values` in order with float32 addition. Overflow produces infinities rather than warnings.'
  with np.errstate(over='ignore', invalid='ignore'):
    return reduce(np.add, values, np.float32(-0.0))


def parse_and_sum(text:str) -> np.float32:
  'Parse all of the numbers in `text` and return their sum; no partial sum is produced on failure.'
  return sum_numbers(parse_numbers(text))


def fmt_sum(value:np.float32) -> str:
  'Format a sum as the shortest text that round trips at float32 precision.'
  return str(value)
