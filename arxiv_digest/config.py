"""
Configuration management for the arXiv Digest system.

This module provides centralized configuration management using environment
variables and python-dotenv. It covers the arXiv query endpoint used by the
feed fetcher, the HTTP server settings, and logging.

Environment variables are loaded from .env file or system environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file if present
load_dotenv()


@dataclass
class ArxivConfig:
    """
    Configuration for the arXiv query API.

    Attributes:
        api_url: Endpoint of the arXiv Atom query API.
        max_results: Default number of entries to request per search.
        timeout: HTTP request timeout in seconds.
        default_query: Query used when the caller does not supply one.
    """

    api_url: str = "http://export.arxiv.org/api/query"
    max_results: int = 5
    timeout: int = 30
    default_query: str = "large language models"

    @classmethod
    def from_env(cls) -> "ArxivConfig":
        """
        Create ArxivConfig from environment variables.

        Returns:
            A configured ArxivConfig instance.

        Examples:
            >>> config = ArxivConfig.from_env()
            >>> config.max_results
            5
        """
        return cls(
            api_url=os.getenv("ARXIV_API_URL", "http://export.arxiv.org/api/query"),
            max_results=int(os.getenv("ARXIV_MAX_RESULTS", "5")),
            timeout=int(os.getenv("ARXIV_TIMEOUT", "30")),
            default_query=os.getenv("ARXIV_DEFAULT_QUERY", "large language models"),
        )

    def build_params(self, query: str, max_results: Optional[int] = None) -> dict:
        """
        Build query-string parameters for the arXiv API.

        Args:
            query: Free-text search terms, matched against all fields.
            max_results: Number of entries to request. Falls back to the
                configured default when None.

        Returns:
            Parameter dictionary suitable for ``requests.get(params=...)``.

        Examples:
            >>> config = ArxivConfig(max_results=5)
            >>> config.build_params("graph neural networks")["search_query"]
            'all:graph neural networks'
        """
        return {
            "search_query": f"all:{query}",
            "start": 0,
            "max_results": max_results if max_results is not None else self.max_results,
        }


@dataclass
class ServerConfig:
    """
    Configuration for the HTTP API server.

    Attributes:
        host: Interface to bind.
        port: Port to listen on.
        cors_origins: Origins allowed by the CORS middleware.
    """

    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """
        Create ServerConfig from environment variables.

        Returns:
            A configured ServerConfig instance.
        """
        origins_str = os.getenv("CORS_ORIGINS", "*")
        origins = [o.strip() for o in origins_str.split(",") if o.strip()]

        return cls(
            host=os.getenv("SERVER_HOST", "0.0.0.0"),
            port=int(os.getenv("SERVER_PORT", "8000")),
            cors_origins=origins or ["*"],
        )


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class LogConfig:
    """
    Settings for the rotating log file and console echo.

    Attributes:
        level: Root logger level name.
        log_dir: Directory holding the log file.
        log_file: Log file name inside ``log_dir``.
        max_bytes: Size at which the file is rotated.
        backup_count: Rotated files kept on disk.
        format_string: ``logging.Formatter`` format.
        date_format: ``logging.Formatter`` date format.
        console_output: Also echo records to stdout.
    """

    level: str = "INFO"
    log_dir: Path = field(default_factory=lambda: Path("data/logs"))
    log_file: str = "arxiv_digest.log"
    max_bytes: int = 5 * 1024 * 1024
    backup_count: int = 3
    format_string: str = DEFAULT_LOG_FORMAT
    date_format: str = DEFAULT_DATE_FORMAT
    console_output: bool = True

    @classmethod
    def from_env(cls) -> "LogConfig":
        """Create LogConfig from ``LOG_*`` variables, creating ``LOG_DIR``."""
        log_dir = Path(os.getenv("LOG_DIR", "data/logs"))
        log_dir.mkdir(parents=True, exist_ok=True)

        return cls(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_dir=log_dir,
            log_file=os.getenv("LOG_FILE", "arxiv_digest.log"),
            max_bytes=int(os.getenv("LOG_MAX_BYTES", str(5 * 1024 * 1024))),
            backup_count=int(os.getenv("LOG_BACKUP_COUNT", "3")),
            format_string=os.getenv("LOG_FORMAT", DEFAULT_LOG_FORMAT),
            date_format=os.getenv("LOG_DATE_FORMAT", DEFAULT_DATE_FORMAT),
            console_output=os.getenv("LOG_CONSOLE_OUTPUT", "true").lower() in ("1", "true", "yes"),
        )


@dataclass
class Config:
    """
    Main configuration container for the arXiv Digest system.

    Aggregates all sub-configurations into a single object. It's typically
    created once at application startup using the from_env() class method
    and passed explicitly to the fetcher and search service.

    Attributes:
        arxiv: arXiv query API configuration.
        server: HTTP server configuration.
        log: Logging configuration.
    """

    arxiv: ArxivConfig = field(default_factory=ArxivConfig.from_env)
    server: ServerConfig = field(default_factory=ServerConfig.from_env)
    log: LogConfig = field(default_factory=LogConfig.from_env)

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create Config from environment variables.

        Returns:
            A fully configured Config instance.

        Examples:
            >>> config = Config.from_env()
            >>> config.arxiv.default_query
            'large language models'
        """
        return cls(
            arxiv=ArxivConfig.from_env(),
            server=ServerConfig.from_env(),
            log=LogConfig.from_env(),
        )
