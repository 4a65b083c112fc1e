"""companiongen.core.engine: パーサーと設定"""

from .config_model import GeneratorConfig, load_config
from .parser import SPLIT_MODES, parse, split_top_level

__all__ = ["GeneratorConfig", "SPLIT_MODES", "load_config", "parse", "split_top_level"]
