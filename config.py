"""
Configuration module for the Azure Citation Chat Proxy.
Loads the .env file once at startup and exposes the values as an immutable config object.
"""
import os
from dataclasses import dataclass
from dotenv import find_dotenv, load_dotenv

from utils.errors import ConfigError


@dataclass(frozen=True)
class Config:
    """Application configuration, read-only after startup."""

    azure_api_key: str
    azure_endpoint: str
    azure_search_endpoint: str
    azure_search_key: str
    azure_search_index: str

    # Application Settings
    APP_TITLE = "Azure Citation Chat Proxy"
    HOST = "0.0.0.0"
    PORT = 8080

    # No deadline on the upstream call
    UPSTREAM_TIMEOUT = None

    @classmethod
    def from_env(cls) -> "Config":
        """Build a config from the current process environment."""
        return cls(
            azure_api_key=os.getenv("AZURE_API_KEY", ""),
            azure_endpoint=os.getenv("AZURE_ENDPOINT", ""),
            azure_search_endpoint=os.getenv("AZURE_SEARCH_ENDPOINT", ""),
            azure_search_key=os.getenv("AZURE_SEARCH_KEY", ""),
            azure_search_index=os.getenv("AZURE_SEARCH_INDEX", ""),
        )

    @classmethod
    def load(cls, env_file: str = ".env") -> "Config":
        """
        Load the dotenv file into the environment and build the config.

        Args:
            env_file: Name of the dotenv file, searched from the working directory upwards

        Returns:
            Populated Config instance

        Raises:
            ConfigError: If the dotenv file cannot be found or read
        """
        path = find_dotenv(env_file, usecwd=True)
        if not path:
            raise ConfigError("Error loading .env file")

        try:
            load_dotenv(path)
        except OSError as e:
            raise ConfigError("Error loading .env file") from e

        return cls.from_env()

    def validate(self) -> None:
        """Print warnings for missing Azure settings."""
        if not self.azure_endpoint:
            print("   WARNING: AZURE_ENDPOINT not found in .env file")
            print("   Every chat request will fail until the completion endpoint is configured.")

        if not self.azure_api_key:
            print("   WARNING: AZURE_API_KEY not found in .env file")

        if not (self.azure_search_endpoint and self.azure_search_index):
            print("   WARNING: AZURE_SEARCH_ENDPOINT or AZURE_SEARCH_INDEX not found in .env file")
            print("   Answers will not be grounded on the search index.")
