"""Top-level package for volumectl."""
__author__ = """volumectl developers"""
__version__ = '0.1.0'

from volumectl.client import ApiClient
from volumectl.config import Settings, load_settings
from volumectl.filters import VolumeFilter
from volumectl.models import Volume, VolumeBind, VolumePlan

__all__ = [
    'ApiClient',
    'Settings',
    'load_settings',
    'Volume',
    'VolumeBind',
    'VolumePlan',
    'VolumeFilter',
]
