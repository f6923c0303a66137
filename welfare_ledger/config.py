"""Configuration management for welfare-ledger."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from welfare_ledger.exceptions import ConfigurationError

# Per-transaction write limit the hosted store was sized for
DEFAULT_CHUNK_SIZE = 500
DEFAULT_LOOKUP_BATCH_SIZE = 10


@dataclass
class MongoConfig:
    """MongoDB connection configuration."""

    uri: str = "mongodb://localhost:27017"
    database: str = "welfare"
    use_transactions: bool = True
    server_selection_timeout_ms: int = 5000

    def client_kwargs(self) -> dict[str, int]:
        """Keyword arguments for ``pymongo.MongoClient``."""
        return {"serverSelectionTimeoutMS": self.server_selection_timeout_ms}


@dataclass
class ImportConfig:
    """Batched import configuration."""

    chunk_size: int = DEFAULT_CHUNK_SIZE
    transactions_collection: str = "transactions"
    members_collection: str = "users"

    def __post_init__(self) -> None:
        if self.chunk_size < 1:
            raise ConfigurationError(f"chunk_size must be positive, got {self.chunk_size}")


@dataclass
class ReportConfig:
    """Lobby report configuration."""

    lookup_batch_size: int = DEFAULT_LOOKUP_BATCH_SIZE
    lookup_workers: int = 1

    def __post_init__(self) -> None:
        if self.lookup_batch_size < 1:
            raise ConfigurationError(
                f"lookup_batch_size must be positive, got {self.lookup_batch_size}"
            )
        if self.lookup_workers < 1:
            raise ConfigurationError(
                f"lookup_workers must be positive, got {self.lookup_workers}"
            )


@dataclass
class OutputConfig:
    """Output configuration."""

    export_dir: Path = field(default_factory=lambda: Path("exports"))


@dataclass
class LedgerConfig:
    """Main configuration for welfare-ledger."""

    mongo: MongoConfig = field(default_factory=MongoConfig)
    imports: ImportConfig = field(default_factory=ImportConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        mongo = MongoConfig(
            uri=os.getenv("MONGODB_URI", "mongodb://localhost:27017"),
            database=os.getenv("MONGODB_DATABASE", "welfare"),
            use_transactions=_env_bool("MONGODB_TRANSACTIONS", True),
            server_selection_timeout_ms=_env_int("MONGODB_TIMEOUT_MS", 5000),
        )

        imports = ImportConfig(
            chunk_size=_env_int("IMPORT_CHUNK_SIZE", DEFAULT_CHUNK_SIZE),
            transactions_collection=os.getenv("TRANSACTIONS_COLLECTION", "transactions"),
            members_collection=os.getenv("MEMBERS_COLLECTION", "users"),
        )

        report = ReportConfig(
            lookup_batch_size=_env_int("LOOKUP_BATCH_SIZE", DEFAULT_LOOKUP_BATCH_SIZE),
            lookup_workers=_env_int("LOOKUP_WORKERS", 1),
        )

        output = OutputConfig(export_dir=Path(os.getenv("EXPORT_DIR", "exports")))

        return cls(
            mongo=mongo,
            imports=imports,
            report=report,
            output=output,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes")
