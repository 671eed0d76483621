# Routers package

from . import clients, drop_cable, fleet, inventory, inventory_requests, link_build, mobile, service_costs

__all__ = [
    "clients",
    "drop_cable",
    "fleet",
    "inventory",
    "inventory_requests",
    "link_build",
    "mobile",
    "service_costs",
]
