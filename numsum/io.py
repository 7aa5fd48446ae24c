# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from sys import stdin
from typing import Any, TextIO

from .exceptions import ReadError
from .resolve import File, Help, InputMode, Literal, Stdin


# std out.

def outL(*items: Any, sep='', flush=False) -> None:
  "Write `items` to std out; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', flush=flush)


# input.

def read_from_file(file:TextIO, name:str) -> str:
  'Read all text from an open file; OS and decoding failures are raised as ReadError.'
  try: return file.read()
  except (OSError, UnicodeDecodeError) as e:
    raise ReadError(f'{name}: {e}') from e


def read_from_path(path:str) -> str:
  'Read all text from the file at `path`.'
  try:
    with open(path, encoding='utf-8', newline='') as f: # Keep carriage returns; they fail to parse like on std in.
      return read_from_file(f, path)
  except OSError as e:
    raise ReadError(str(e)) from e


def read_from_stdin() -> str:
  'Read std in to the end of the stream.'
  return read_from_file(stdin, '<stdin>')


def acquire_text(mode:InputMode) -> str:
  '''
  Obtain the raw numeric text for `mode`.
  `Help` has no text; the caller must handle it before calling this function.
  '''
  if isinstance(mode, Stdin): return read_from_stdin()
  if isinstance(mode, Literal): return mode.text
  if isinstance(mode, File): return read_from_path(mode.path)
  if isinstance(mode, Help): raise ValueError('help mode has no input text.')
  raise TypeError(mode)
