from designcode.core.config.loader import load_config, load_engine_config
from designcode.core.config.models import EngineConfig, LoggingConfig, SequenceStoreConfig

__all__ = [
    "EngineConfig",
    "LoggingConfig",
    "SequenceStoreConfig",
    "load_config",
    "load_engine_config",
]
