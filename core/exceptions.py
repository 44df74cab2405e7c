# core/exceptions.py

class SmithError(Exception):
    """Base exception for Smith chart engine errors."""
    pass

class DomainError(SmithError):
    """Raised when an input lies outside the physical domain (e.g. negative resistance)."""
    pass

class SynthesisError(SmithError):
    """Raised when a matching network cannot be realized for a load."""
    pass

class ConfigError(SmithError):
    """Raised when an engine configuration file cannot be loaded or validated."""
    pass
