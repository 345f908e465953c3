from .registry import RatioAlias, RatioSettings, get_settings

__all__ = [
    "RatioAlias",
    "RatioSettings",
    "get_settings",
]
