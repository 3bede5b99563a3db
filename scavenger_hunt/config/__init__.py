from .settings import Config, ConfigManager, config_manager

__all__ = [
    'Config',
    'ConfigManager',
    'config_manager'
]
