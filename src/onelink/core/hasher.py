"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements content fingerprinting with pluggable hash algorithms.

HasherImpl streams a whole file through the configured algorithm in fixed-size
reads and returns the raw 32-byte digest. Nothing is cached between files or runs.
"""

import hashlib
import blake3
from onelink.core.errors import ReadError
from onelink.core.interfaces import Hasher, HashAlgorithm, HashObject
from onelink.core.models import HashAlgorithmName, DEFAULT_CHUNK_SIZE


# Use the same way to implement and use any other hashing algorithm
class Sha256AlgorithmImpl(HashAlgorithm):
    digest_size = 32

    def new(self) -> HashObject:
        return hashlib.sha256()


class Blake3AlgorithmImpl(HashAlgorithm):
    digest_size = 32

    def new(self) -> HashObject:
        return blake3.blake3()


ALGORITHMS = {
    HashAlgorithmName.SHA256: Sha256AlgorithmImpl,
    HashAlgorithmName.BLAKE3: Blake3AlgorithmImpl,
}


def algorithm_for(name: HashAlgorithmName) -> HashAlgorithm:
    return ALGORITHMS[name]()


class HasherImpl(Hasher):
    """
    A hasher that supports any algorithm via the HashAlgorithm interface.
    Reads the full content of a file sequentially, chunk_size bytes at a time.
    """

    def __init__(self, algorithm: HashAlgorithm, chunk_size: int = DEFAULT_CHUNK_SIZE):
        self.algorithm = algorithm
        self.chunk_size = chunk_size

    def compute_fingerprint(self, path: str) -> bytes:
        """Raises ReadError if the file cannot be opened or read to the end."""
        hash_object = self.algorithm.new()
        try:
            with open(path, 'rb') as f:
                while True:
                    chunk = f.read(self.chunk_size)
                    if not chunk:
                        break
                    hash_object.update(chunk)
        except OSError as e:
            raise ReadError("Cannot read file", path=path, cause=e) from e
        return hash_object.digest()
