"""Endpoint services built on the RestClient transport primitives."""

from .contract import FutureContractService
from .spot import SpotV1Service
from .v5_order import V5OrderService

__all__ = ["FutureContractService", "SpotV1Service", "V5OrderService"]
