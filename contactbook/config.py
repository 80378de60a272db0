# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate all configuration from environment
#   variables / .env file. Provides typed config objects
#   to all other modules.
#
# CLASSES:
# --------
# - StoreConfig (dataclass)
#     capacity: int             (default 1000)
#
# - CodecConfig (dataclass)
#     n: int                    (default 3233 = 61 * 53)
#     e: int                    (default 17)
#     d: int                    (default 2753)
#
# - PersistenceConfig (dataclass)
#     data_file: str            (default "contacts.enc")
#     max_buffer_bytes: int     (default 100000)
#
# - AppConfig (dataclass)
#     store: StoreConfig
#     codec: CodecConfig
#     persistence: PersistenceConfig
#
# FUNCTION:
# ---------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# USAGE:
# ------
#   from contactbook.config import get_config
#   config = get_config()
#   print(config.persistence.data_file)
#   print(config.store.capacity)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


@dataclass
class StoreConfig:
    """In-memory record store configuration."""
    capacity: int = 1000


@dataclass
class CodecConfig:
    """
    Key material for the per-byte codec.

    These are small, publicly known constants kept for file compatibility.
    They do not protect the contents of the file.
    """
    n: int = 3233
    e: int = 17
    d: int = 2753


@dataclass
class PersistenceConfig:
    """Encoded contact file configuration."""
    data_file: str = "contacts.enc"
    max_buffer_bytes: int = 100_000


@dataclass
class AppConfig:
    """Main application configuration."""
    store: StoreConfig = field(default_factory=StoreConfig)
    codec: CodecConfig = field(default_factory=CodecConfig)
    persistence: PersistenceConfig = field(default_factory=PersistenceConfig)


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    store_config = StoreConfig(
        capacity=_int_env("CONTACTBOOK_CAPACITY", 1000)
    )

    codec_config = CodecConfig(
        n=_int_env("CONTACTBOOK_CODEC_N", 3233),
        e=_int_env("CONTACTBOOK_CODEC_E", 17),
        d=_int_env("CONTACTBOOK_CODEC_D", 2753)
    )

    persistence_config = PersistenceConfig(
        data_file=os.getenv("CONTACTBOOK_DATA_FILE", "contacts.enc"),
        max_buffer_bytes=_int_env("CONTACTBOOK_MAX_BUFFER_BYTES", 100_000)
    )

    _config_instance = AppConfig(
        store=store_config,
        codec=codec_config,
        persistence=persistence_config
    )

    return _config_instance
