"""High-level API facades."""

from .client import SonarClient
from .config import ClientConfig

__all__ = ["ClientConfig", "SonarClient"]
