from .loader import load_config  # noqa: F401
from .model import ParserConfig  # noqa: F401

__all__ = ["ParserConfig", "load_config"]
