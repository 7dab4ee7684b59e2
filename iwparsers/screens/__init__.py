"""
Screen parsers - one per recognizable game screen layout.
"""

from .base import ScreenParser
from .info_schiff import ShipInfoParser
from .mil_schiff_uebersicht import ShipOverviewParser
from .index_geb import BuildingQueueParser

__all__ = [
    'ScreenParser',
    'ShipInfoParser',
    'ShipOverviewParser',
    'BuildingQueueParser',
]
