from .loader import ConfigError, load_config, load_yaml_config, parse_config

# Config exports are intentionally small; models live in nativelog.config.models.
__all__ = ["ConfigError", "load_config", "load_yaml_config", "parse_config"]
