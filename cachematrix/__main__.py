import logging

import numpy as np

from cachematrix.cache_cell import make_cache_cell
from cachematrix.resolve import resolve_inverse


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    D = np.array([2, 3, 1, 5, 1, 0, 3, 1, 0, 2, -3, 2, 0, 2, 3, 1], dtype=float).reshape(4, 4, order="F")
    d = make_cache_cell(D)          # no inverse computed yet
    d_inv = resolve_inverse(d)      # computed now
    d_inv = resolve_inverse(d)      # cached
    print(d_inv)

    d.set(np.eye(3))                # invalidates the cached inverse
    d_inv = resolve_inverse(d)      # computed again
    d_inv = resolve_inverse(d)      # cached
    print(d.get())


if __name__ == "__main__":
    main()
