"""
Managers for configuration and static content
"""

from .config_manager import ConfigManager
from .content_manager import ContentManager

__all__ = ['ConfigManager', 'ContentManager']
