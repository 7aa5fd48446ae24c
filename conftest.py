# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_numbers(tmp_path:Path) -> Callable[..., str]:
  'Return a function that writes text to a fresh file under `tmp_path` and returns its path.'
  def write(text:str|bytes, name='numbers.txt') -> str:
    path = tmp_path / name
    if isinstance(text, bytes): path.write_bytes(text)
    else: path.write_text(text)
    return str(path)
  return write
