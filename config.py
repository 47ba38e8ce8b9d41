# ========================= config.py =========================
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ReaderConfig:
    workers: int = 1          # >1 interprets tracks in a thread pool


@dataclass
class OutputConfig:
    format: str = "text"      # or "json"
    error_channel: str = "error"


@dataclass
class LogConfig:
    level: str = "INFO"
    to_file: bool = True
    log_dir: Optional[str] = None   # defaults to ./logs


@dataclass
class AppConfig:
    reader: ReaderConfig = field(default_factory=ReaderConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log: LogConfig = field(default_factory=LogConfig)
