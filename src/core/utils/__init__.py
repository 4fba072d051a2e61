"""
Utility modules for core functionality - functional architecture.

This package contains reusable utility functions for domain-agnostic operations.

Modules:
- decorators: Utility decorators (timer, log_effect)
"""

# Decorators
from .decorators import log_effect, timer

__all__ = [
    # Decorators
    "log_effect",
    "timer",
]
