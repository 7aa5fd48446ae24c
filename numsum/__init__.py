# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
numsum sums space and newline delimited numbers read from a command line argument, a file, or std in.
'''
