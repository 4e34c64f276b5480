import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

DEFAULT_SEED_PATH = str(Path(__file__).resolve().parent / "data" / "seed_items.yml")


def env_bool(key: str, default: bool = False) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "on"}


@dataclass
class AppConfig:
    database_url: str = field(
        default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///./risk_register.db")
    )
    storage_slot: str = field(default_factory=lambda: os.getenv("STORAGE_SLOT", "risk_register_items"))
    seed_path: str = field(default_factory=lambda: os.getenv("SEED_PATH", DEFAULT_SEED_PATH))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    jitter_source: str = field(default_factory=lambda: os.getenv("JITTER_SOURCE", "index"))
    report_title: str = field(
        default_factory=lambda: os.getenv("REPORT_TITLE", "Strategic Risk Register - Building Safety")
    )
    upcoming_limit: int = field(default_factory=lambda: int(os.getenv("UPCOMING_LIMIT", "5")))
    quick_win_threshold: float = field(
        default_factory=lambda: float(os.getenv("QUICK_WIN_THRESHOLD", "5000"))
    )
    debug: bool = field(default_factory=lambda: env_bool("DEBUG", False))
    export_version: int = 1

    @classmethod
    def from_env(cls) -> "AppConfig":
        return cls()

    def as_dict(self) -> Dict[str, Any]:
        return {
            "database_url": self.database_url,
            "storage_slot": self.storage_slot,
            "seed_path": self.seed_path,
            "log_level": self.log_level,
            "jitter_source": self.jitter_source,
            "report_title": self.report_title,
            "upcoming_limit": self.upcoming_limit,
            "quick_win_threshold": self.quick_win_threshold,
            "debug": self.debug,
            "export_version": self.export_version,
        }
