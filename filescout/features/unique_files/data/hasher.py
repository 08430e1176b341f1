from pathlib import Path
from typing import Optional

from filescout.core.config.settings import settings

from ..domain.errors import HashIOError
from ..domain.interfaces import IHasher


class StreamingHasher(IHasher):
    def __init__(self, chunk_size: Optional[int] = None):
        if chunk_size is None:
            chunk_size = settings.HASH_CHUNK_SIZE
        # f.read() with a non-positive size would slurp the whole file
        if chunk_size <= 0:
            raise ValueError(f"Hash chunk size must be positive, got {chunk_size}.")
        self.chunk_size = chunk_size

    def calculate(self, file_path: Path, digest) -> str:
        """
        Streams the file in fixed-size chunks so large files
        never have to fit in memory.
        """
        try:
            with open(file_path, "rb") as f:
                for byte_block in iter(lambda: f.read(self.chunk_size), b""):
                    digest.update(byte_block)
        except OSError as e:
            raise HashIOError(file_path, str(e)) from e
        return digest.hexdigest()
