# word_search/utils/__init__.py
# logging facade and JSON config used by the menu

from .logger_utils import Log
from .config_manager import Config

__all__ = ["Log", "Config"]
