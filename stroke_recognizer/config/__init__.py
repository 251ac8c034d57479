"""
Configuration for normalization, matching and storage.
"""

from .settings import RecognizerConfig, SearchSettings

__all__ = ['RecognizerConfig', 'SearchSettings']
