"""Configuration for the payment engine."""
import os
from dataclasses import dataclass


@dataclass
class EngineConfig:

    """Runtime settings."""

    log_level: str = 'WARNING'
    chunksize: int = 1000

    def __post_init__(self):
        if self.chunksize < 1:
            raise ValueError(f'chunksize must be at least 1, got {self.chunksize}')

    @classmethod
    def from_env(cls):
        """Create config from environment variables."""
        return cls(
            log_level=os.getenv('PAYMENT_ENGINE_LOG_LEVEL', 'WARNING'),
            chunksize=int(os.getenv('PAYMENT_ENGINE_CHUNKSIZE', '1000')),
        )
