"""
Configuration loader for words_filter.

Loads settings from a YAML config file with sensible defaults.
"""

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List, Optional

import yaml

from .filter import WordsFilter

logger = logging.getLogger(__name__)


@dataclass
class FilterConfig:
    """Configuration for the word filter."""
    placeholder: str = "*"
    strip_space: bool = False  # Remove whitespace before matching
    wordlists: List[str] = field(default_factory=list)  # One root per file


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    log_file: str = ""


@dataclass
class Config:
    """Main configuration container."""
    filter: FilterConfig = field(default_factory=FilterConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    
    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from YAML file.
        
        If no path is provided, uses default values.
        Missing keys in the config file will use defaults.
        
        Raises:
            yaml.YAMLError: If the file is not valid YAML
        """
        config = cls()
        
        if config_path and Path(config_path).exists():
            logger.info(f"Loading configuration from {config_path}")
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
            
            for section in ('filter', 'logging'):
                values = data.get(section) or {}
                target = getattr(config, section)
                for key, value in values.items():
                    if hasattr(target, key):
                        setattr(target, key, value)
                    else:
                        logger.warning(f"Ignoring unknown setting {section}.{key}")
            
            if isinstance(config.filter.wordlists, str):
                config.filter.wordlists = [config.filter.wordlists]
        
        return config
    
    def build_filter(self) -> WordsFilter:
        """Create a WordsFilter from the filter settings."""
        return WordsFilter(
            placeholder=self.filter.placeholder,
            strip_space=bool(self.filter.strip_space),
        )
    
    def save(self, config_path: Path) -> None:
        """Save configuration to YAML file."""
        data = asdict(self)
        logger.info(f"Saving configuration to {config_path}")
        
        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False)
