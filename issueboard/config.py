# Issue board configuration
# Override defaults via a YAML file, environment variables or CLI args.

import os
import yaml
from pathlib import Path
from dataclasses import dataclass, fields
from typing import Optional

# Resolved against the working directory; use ISSUEBOARD_CONFIG or --config elsewhere
CONFIG_PATH = Path("issueboard.yaml")


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""
    pass


@dataclass
class Config:
    """Runtime configuration for the board server and client."""

    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    seed: bool = True              # Load the example issues at startup

    # API behavior
    strict_status: bool = False    # Reject statuses outside todo/doing/done/closed
    not_found_status: int = 400    # Status code for unknown issue ids

    # Logging
    log_level: str = "INFO"

    # Client
    api_url: str = "http://127.0.0.1:3000"
    timeout: float = 5.0

    def validate(self):
        """Coerce numeric fields and reject values that cannot work."""
        try:
            self.port = int(self.port)
            self.not_found_status = int(self.not_found_status)
            self.timeout = float(self.timeout)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid numeric setting: {e}")
        if not 0 < self.port < 65536:
            raise ConfigError(f"port out of range: {self.port}")
        if not 400 <= self.not_found_status < 500:
            raise ConfigError(
                f"not_found_status must be a 4xx code, got {self.not_found_status}"
            )
        for name in ("host", "api_url", "log_level"):
            if not isinstance(getattr(self, name), str):
                raise ConfigError(f"{name} must be a string, got {getattr(self, name)!r}")
        self.log_level = self.log_level.upper()
        self.api_url = self.api_url.rstrip("/")

    def apply_env(self):
        """Environment overrides for deployment."""
        if os.environ.get("ISSUEBOARD_HOST"):
            self.host = os.environ["ISSUEBOARD_HOST"]
        if os.environ.get("ISSUEBOARD_PORT"):
            self.port = os.environ["ISSUEBOARD_PORT"]

    @classmethod
    def load(cls, path: Optional[str] = None) -> "Config":
        """Load config from YAML file, falling back to defaults."""
        if path is None:
            path = os.environ.get("ISSUEBOARD_CONFIG")
        cfg_path = Path(path) if path else CONFIG_PATH
        known = {f.name for f in fields(cls)}
        if cfg_path.exists():
            try:
                with open(cfg_path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
                cfg = cls(**{k: v for k, v in data.items() if k in known})
            except Exception:
                cfg = cls()
        else:
            cfg = cls()
        cfg.apply_env()
        cfg.validate()
        return cfg
