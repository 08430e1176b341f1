# File: filescout/core/config/settings.py

import logging
import os


class Settings:
    # --- Hashing ---
    # Any name accepted by hashlib.new(); used when no hasher_fn is configured
    HASH_ALGORITHM: str = os.getenv("FILESCOUT_HASH_ALGORITHM", "sha256")
    # Read size while streaming a file through the digest
    HASH_CHUNK_SIZE: int = int(os.getenv("FILESCOUT_HASH_CHUNK_SIZE", "65536"))

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("FILESCOUT_LOG_LEVEL", "INFO")

    def configure_logging(self):
        """Installs a basic stderr handler for applications embedding the finder."""
        logging.basicConfig(
            level=getattr(logging, self.LOG_LEVEL.upper(), logging.INFO),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


settings = Settings()
