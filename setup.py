# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='numsum',
  version='0.0.1',
  description='Sum space and newline delimited numbers from arguments, a file, or std in.',

  packages=['numsum', 'numsum.bin'],
  python_requires='>=3.10',
  install_requires=['numpy'],
  extras_require={'test': ['pytest']},
  entry_points={'console_scripts': ['numsum=numsum.bin.numsum:main']},
)
