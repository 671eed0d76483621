# ORM models (tabellen zijn eigendom van de hosted database)

from .client import Client
from .drop_cable import DropCable
from .fleet import Vehicle
from .inventory import InventoryItem, InventoryRequest
from .link_build import LinkBuild
from .service_cost import RATE_COLUMNS, ServiceCost
from .staff import Staff

__all__ = [
    "Client",
    "DropCable",
    "InventoryItem",
    "InventoryRequest",
    "LinkBuild",
    "RATE_COLUMNS",
    "ServiceCost",
    "Staff",
    "Vehicle",
]
