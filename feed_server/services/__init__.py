"""Backing logic: event gateways for the ranking pipeline."""

from .json_gateway import JsonEventGateway
from .supabase_gateway import SupabaseEventGateway

__all__ = [
    "JsonEventGateway",
    "SupabaseEventGateway",
]
