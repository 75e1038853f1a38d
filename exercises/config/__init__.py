"""Configuration for the text exercises."""
from .loader import load_config
from .models import DEFAULT_SMILE, TextConfig

__all__ = ["DEFAULT_SMILE", "TextConfig", "load_config"]
