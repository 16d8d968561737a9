"""Sous-package CLI - re-exporte les commandes publiques."""

from vimeo_model.adapters.cli.commands import (
    classify_error,
    inspect_user,
    inspect_video,
)

__all__ = [
    "classify_error",
    "inspect_user",
    "inspect_video",
]
