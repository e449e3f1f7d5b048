"""
The datapack compilation model: datapacks own namespaces, namespaces own
entities.
"""

from .namespace import Namespace, DATA_CATEGORIES
from .datapack import Datapack, DEFAULT_PACK_FORMAT

__all__ = ["Namespace", "Datapack", "DATA_CATEGORIES", "DEFAULT_PACK_FORMAT"]
