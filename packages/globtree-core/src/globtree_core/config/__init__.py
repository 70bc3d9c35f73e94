from .loader import DEFAULT_CONFIG_TEMPLATE, load_config
from .models import GlobtreeConfig, ListingConfig, PatternConfig

__all__ = [
    "DEFAULT_CONFIG_TEMPLATE",
    "GlobtreeConfig",
    "ListingConfig",
    "PatternConfig",
    "load_config",
]
