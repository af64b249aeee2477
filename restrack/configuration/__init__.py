"""RESTRack configuration"""
from .app_config import AppConfig
from .utils import ConfigError, coerce_config, coerce_options

__all__ = ['AppConfig', 'ConfigError', 'coerce_config', 'coerce_options']
