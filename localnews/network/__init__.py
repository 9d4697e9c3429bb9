"""Network helpers."""

from .connectivity import ConnectivityChecker

__all__ = ["ConnectivityChecker"]
