"""Startup errors. Both are fatal: the game never opens a frame after one."""


class ConfigError(ValueError):
    """Raised when a GameConfig value is out of range."""


class AssetLoadError(Exception):
    """Raised when an image or font file cannot be loaded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load asset '{path}': {reason}")
