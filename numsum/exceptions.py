# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Exception classes raised while resolving, reading, and parsing numeric input.
'''


class NumSumError(Exception):
  'Base class for all errors that abort a numsum run.'


class MissingArgument(NumSumError):
  'Raised when a flag that requires a value is the last argument.'


class ReadError(NumSumError):
  '''
  Raised when std in or an input file cannot be read.
  The underlying OSError or UnicodeDecodeError is chained as `__cause__`.
  '''


class ParseError(NumSumError):
  'Raised when a token is not a valid number.'

  def __init__(self, token:str) -> None:
    self.token = token
    super().__init__(f"Failed to parse '{token}'")
