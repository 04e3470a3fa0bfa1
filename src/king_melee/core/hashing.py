"""
Board fingerprinting - stable short hashes of int8 board encodings.
"""

import hashlib

import numpy as np


def hash_board(board: np.ndarray) -> str:
    """
    Short hex fingerprint of an encoded board.

    The shape is mixed into the digest so that boards holding the same
    bytes in different layouts do not collide.
    """
    digest = hashlib.sha256()
    digest.update(repr(board.shape).encode())
    digest.update(np.ascontiguousarray(board, dtype=np.int8).tobytes())
    return digest.hexdigest()[:16]
