import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


class PathsConfig(BaseModel):
    log_dir: str = Field(default="logs")

class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    rotation: str = Field(default="10 MB")
    retention: str = Field(default="10 days")

class IngestionConfig(BaseModel):
    request_timeout: int = Field(default=60)
    download_chunk_size: int = Field(default=1024 * 1024)
    spool_max_size: int = Field(default=64 * 1024 * 1024)

class DistributionConfig(BaseModel):
    client_id: Optional[str] = Field(default_factory=lambda: os.getenv("GOOGLE_CLIENT_ID"))
    client_secret: Optional[str] = Field(default_factory=lambda: os.getenv("GOOGLE_CLIENT_SECRET"))
    refresh_token: Optional[str] = Field(default_factory=lambda: os.getenv("YOUTUBE_REFRESH_TOKEN"))
    token_uri: str = Field(default="https://oauth2.googleapis.com/token")
    watch_url_base: str = Field(default="https://www.youtube.com/watch?v=")
    upload_chunk_size: int = Field(default=-1)

class ServerConfig(BaseModel):
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)

class AppConfig(BaseModel):
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    ingestion: IngestionConfig = Field(default_factory=IngestionConfig)
    distribution: DistributionConfig = Field(default_factory=DistributionConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

class ConfigManager:
    """
    Manages loading and validation of application configuration.
    """
    def __init__(self, config_path: str = "config/settings.yaml"):
        self.config_path = Path(config_path)
        self.config: AppConfig = self._load_config()

    def _load_config(self) -> AppConfig:
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found at {self.config_path}")

        with open(self.config_path, "r") as f:
            raw_config = yaml.safe_load(f) or {}

        return AppConfig(**raw_config)

    @property
    def paths(self) -> PathsConfig:
        return self.config.paths

    @property
    def logging(self) -> LoggingConfig:
        return self.config.logging

    @property
    def ingestion(self) -> IngestionConfig:
        return self.config.ingestion

    @property
    def distribution(self) -> DistributionConfig:
        return self.config.distribution

    @property
    def server(self) -> ServerConfig:
        return self.config.server
