"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from catalog_browser.adapters.sources import DEFAULT_README_URL


@dataclass
class SourceConfig:
    """Document source settings."""
    url: str = DEFAULT_README_URL
    timeout: float = 30.0


@dataclass
class BrowserConfig:
    """Query and pagination settings."""
    page_size: int = 18
    page_size_options: list[int] = field(default_factory=lambda: [18, 27, 36, 45])
    debounce_ms: int = 300
    sort_key: str = "name"


@dataclass
class ParserConfig:
    """Parsing settings."""
    excluded_titles: list[str] = field(default_factory=lambda: [
        "Star History",
        "Contributors",
    ])


@dataclass
class Settings:
    """Application settings."""
    
    source: SourceConfig = field(default_factory=SourceConfig)
    browser: BrowserConfig = field(default_factory=BrowserConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)
    
    @property
    def source_url(self) -> str:
        return self.source.url
    
    @property
    def page_size(self) -> int:
        return self.browser.page_size
    
    @property
    def debounce_ms(self) -> int:
        return self.browser.debounce_ms
    
    @property
    def excluded_titles(self) -> list[str]:
        return self.parser.excluded_titles


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}
    
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)
    settings = Settings()
    
    if "source" in config:
        for key, value in config["source"].items():
            setattr(settings.source, key, value)
    
    if "browser" in config:
        for key, value in config["browser"].items():
            setattr(settings.browser, key, value)
    
    if "parser" in config:
        settings.parser = ParserConfig(**config["parser"])
    
    # Environment wins over YAML
    env_url = os.getenv("CATALOG_SOURCE_URL")
    if env_url:
        settings.source.url = env_url
    
    if settings.browser.page_size <= 0:
        raise ValueError("browser.page_size must be positive")
    
    return settings
