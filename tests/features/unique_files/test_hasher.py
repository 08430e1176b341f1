import hashlib
import pytest

from filescout.core.config.settings import settings
from filescout.features.unique_files.data.hasher import StreamingHasher
from filescout.features.unique_files.domain.errors import HashIOError


@pytest.fixture
def big_file(tmp_path):
    p = tmp_path / "big.bin"
    p.write_bytes(bytes(range(256)) * 1000)
    return p


def test_digest_matches_whole_file_hash(big_file):
    expected = hashlib.sha256(big_file.read_bytes()).hexdigest()

    assert StreamingHasher().calculate(big_file, hashlib.sha256()) == expected


def test_small_chunks_give_the_same_digest(big_file):
    """
    Chunk size is a memory knob only; the digest must not depend on it.
    """
    default = StreamingHasher().calculate(big_file, hashlib.sha256())
    tiny = StreamingHasher(chunk_size=7).calculate(big_file, hashlib.sha256())

    assert tiny == default


def test_digest_is_lowercase_hex(tmp_path):
    p = tmp_path / "a.txt"
    p.write_text("hello")

    digest = StreamingHasher().calculate(p, hashlib.sha256())

    assert len(digest) == 64
    assert digest == digest.lower()


def test_open_failure_is_wrapped_with_the_path(tmp_path):
    # Opening a directory for reading fails on every platform
    with pytest.raises(HashIOError) as excinfo:
        StreamingHasher().calculate(tmp_path, hashlib.sha256())

    assert excinfo.value.path == tmp_path
    assert str(tmp_path) in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)


class RecordingDigest:
    """Wraps a real digest and remembers each block it was fed."""

    def __init__(self):
        self.inner = hashlib.sha256()
        self.blocks = []

    def update(self, data):
        self.blocks.append(len(data))
        self.inner.update(data)

    def hexdigest(self):
        return self.inner.hexdigest()


def test_file_is_read_in_chunks(big_file):
    digest = RecordingDigest()

    StreamingHasher(chunk_size=1000).calculate(big_file, digest)

    assert max(digest.blocks) == 1000
    assert sum(digest.blocks) == big_file.stat().st_size


@pytest.mark.parametrize("chunk_size", [0, -1])
def test_non_positive_chunk_size_is_rejected(chunk_size):
    with pytest.raises(ValueError, match="chunk size"):
        StreamingHasher(chunk_size=chunk_size)


def test_non_positive_chunk_size_from_settings_is_rejected(monkeypatch):
    monkeypatch.setattr(settings, "HASH_CHUNK_SIZE", -1)

    with pytest.raises(ValueError, match="chunk size"):
        StreamingHasher()
