"""Registry, scenarios and household bootstrap."""

from .registry import HomeRegistry, HomeStatus
from .facade import SmartHomeFacade
from .bootstrap import Home, build_default_home, simulate_day

__all__ = [
    'HomeRegistry',
    'HomeStatus',
    'SmartHomeFacade',
    'Home',
    'build_default_home',
    'simulate_day'
]
