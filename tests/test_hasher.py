"""
Unit tests for HasherImpl with SHA-256 and BLAKE3.
Verifies full-content 32-byte fingerprints and fatal read errors.
"""
import hashlib
import blake3
import pytest
from unittest import mock
from onelink.core.errors import ReadError
from onelink.core.hasher import (
    HasherImpl, Sha256AlgorithmImpl, Blake3AlgorithmImpl, algorithm_for,
)
from onelink.core.models import HashAlgorithmName


class TestHasherImpl:
    """Test streaming fingerprint computation."""

    def test_sha256_matches_hashlib(self, temp_dir):
        content = b"test content " * 1000
        path = temp_dir / "file.jpg"
        path.write_bytes(content)

        fingerprint = HasherImpl(Sha256AlgorithmImpl()).compute_fingerprint(str(path))

        assert fingerprint == hashlib.sha256(content).digest()
        assert len(fingerprint) == 32  # 256 bits

    def test_blake3_matches_reference(self, temp_dir):
        content = b"blake3 content " * 1000
        path = temp_dir / "file.mov"
        path.write_bytes(content)

        fingerprint = HasherImpl(Blake3AlgorithmImpl()).compute_fingerprint(str(path))

        assert fingerprint == blake3.blake3(content).digest()
        assert len(fingerprint) == 32

    def test_small_chunks_give_same_digest(self, temp_dir):
        """Chunk size changes how the file is read, never the result."""
        content = bytes(range(256)) * 97
        path = temp_dir / "odd.png"
        path.write_bytes(content)

        whole = HasherImpl(Sha256AlgorithmImpl()).compute_fingerprint(str(path))
        chunked = HasherImpl(Sha256AlgorithmImpl(), chunk_size=7).compute_fingerprint(str(path))

        assert whole == chunked

    def test_same_content_same_fingerprint_regardless_of_name(self, temp_dir):
        a = temp_dir / "a.jpg"
        b = temp_dir / "completely-different-name.png"
        a.write_bytes(b"identical")
        b.write_bytes(b"identical")

        hasher = HasherImpl(Sha256AlgorithmImpl())
        assert hasher.compute_fingerprint(str(a)) == hasher.compute_fingerprint(str(b))

    def test_different_content_different_fingerprint(self, temp_dir):
        a = temp_dir / "a.jpg"
        b = temp_dir / "b.jpg"
        a.write_bytes(b"A" * 1024)
        b.write_bytes(b"B" * 1024)

        hasher = HasherImpl(Sha256AlgorithmImpl())
        assert hasher.compute_fingerprint(str(a)) != hasher.compute_fingerprint(str(b))

    def test_empty_file(self, temp_dir):
        path = temp_dir / "empty.jpg"
        path.write_bytes(b"")
        fingerprint = HasherImpl(Sha256AlgorithmImpl()).compute_fingerprint(str(path))
        assert fingerprint == hashlib.sha256(b"").digest()


class TestReadErrors:
    """Open/read failures are fatal and carry the path."""

    def test_deleted_file_raises_read_error(self, temp_dir):
        path = temp_dir / "deleted.jpg"
        path.write_bytes(b"content")
        path.unlink()  # Delete BEFORE hashing

        with pytest.raises(ReadError) as exc_info:
            HasherImpl(Sha256AlgorithmImpl()).compute_fingerprint(str(path))

        assert exc_info.value.path == str(path)
        assert isinstance(exc_info.value.cause, FileNotFoundError)

    def test_io_error_mid_read_raises_read_error(self, temp_dir):
        path = temp_dir / "flaky.jpg"
        path.write_bytes(b"content")

        with mock.patch("builtins.open", side_effect=OSError(5, "Input/output error")):
            with pytest.raises(ReadError, match="Cannot read file"):
                HasherImpl(Sha256AlgorithmImpl()).compute_fingerprint(str(path))


class TestAlgorithmLookup:

    def test_algorithm_for_each_name(self):
        assert isinstance(algorithm_for(HashAlgorithmName.SHA256), Sha256AlgorithmImpl)
        assert isinstance(algorithm_for(HashAlgorithmName.BLAKE3), Blake3AlgorithmImpl)

    def test_both_algorithms_produce_256_bit_digests(self):
        for name in HashAlgorithmName:
            algorithm = algorithm_for(name)
            assert algorithm.digest_size == 32
            assert len(algorithm.new().digest()) == 32
