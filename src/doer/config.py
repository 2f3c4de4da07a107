"""
Configuration management

Settings are read from config/app_config.yaml (or the file named by the
DOER_CONFIG environment variable). DOER_HOST, DOER_PORT, DOER_URL,
DOER_TIMEOUT, DOER_LOG_LEVEL and DOER_LOG_FILE override the file, and command
line flags override both.
Related classes:
  - server.run: uses ServerConfig to bind the RPC server
  - client.rpc.TaskServiceClient: uses ClientConfig for the base URL and timeout
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "app_config.yaml"


@dataclass
class ServerConfig:
    """RPC server settings"""

    host: str = "127.0.0.1"
    port: int = 50051


@dataclass
class ClientConfig:
    """RPC client settings"""

    url: str = "http://127.0.0.1:50051"
    timeout: float = 1.0  # seconds per call


@dataclass
class Config:
    """Application settings"""

    server: ServerConfig = None  # type: ignore
    client: ClientConfig = None  # type: ignore

    # logging
    log_level: str = "INFO"
    log_file: str = "logs/doer.log"

    def __post_init__(self):
        if self.server is None:
            self.server = ServerConfig()
        if self.client is None:
            self.client = ClientConfig()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "Config":
        """Load settings from a YAML file

        Args:
            config_path: settings file (DOER_CONFIG or config/app_config.yaml when omitted)

        Returns:
            Config: settings instance; defaults when the default file does not exist

        Raises:
            FileNotFoundError: an explicitly given file does not exist
        """
        if config_path is None:
            env_path = os.getenv("DOER_CONFIG")
            if env_path:
                config_path = Path(env_path)
            elif DEFAULT_CONFIG_PATH.exists():
                config_path = DEFAULT_CONFIG_PATH
            else:
                return cls().apply_env()

        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data: Dict[str, Any] = yaml.safe_load(f) or {}

        server_data = yaml_data.get("server", {})
        client_data = yaml_data.get("client", {})
        log_data = yaml_data.get("log", {})

        config = cls(
            server=ServerConfig(
                host=server_data.get("host", "127.0.0.1"),
                port=int(server_data.get("port", 50051)),
            ),
            client=ClientConfig(
                url=client_data.get("url", "http://127.0.0.1:50051"),
                timeout=float(client_data.get("timeout", 1.0)),
            ),
            log_level=log_data.get("level", "INFO"),
            log_file=log_data.get("file", "logs/doer.log"),
        )
        return config.apply_env()

    @classmethod
    def from_env(cls) -> "Config":
        """Load settings from environment variables only"""
        return cls().apply_env()

    def apply_env(self) -> "Config":
        """Override settings with the DOER_* environment variables that are set"""
        if os.getenv("DOER_HOST"):
            self.server.host = os.environ["DOER_HOST"]
        if os.getenv("DOER_PORT"):
            self.server.port = int(os.environ["DOER_PORT"])
        if os.getenv("DOER_URL"):
            self.client.url = os.environ["DOER_URL"]
        if os.getenv("DOER_TIMEOUT"):
            self.client.timeout = float(os.environ["DOER_TIMEOUT"])
        if os.getenv("DOER_LOG_LEVEL"):
            self.log_level = os.environ["DOER_LOG_LEVEL"]
        if os.getenv("DOER_LOG_FILE"):
            self.log_file = os.environ["DOER_LOG_FILE"]
        return self
