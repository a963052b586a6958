"""Catalog loading, identity derivation and canonical URLs."""

from src.catalog.identity import (
    build_identity,
    decode_badge_path,
    encode_badge_path,
    extract_server_info,
    identity_from_badge_path,
    normalize_identity,
)
from src.catalog.loader import CatalogLoader, build_placeholder, rank_records

__all__ = [
    # Identity
    "build_identity",
    "decode_badge_path",
    "encode_badge_path",
    "extract_server_info",
    "identity_from_badge_path",
    "normalize_identity",
    # Loading
    "CatalogLoader",
    "build_placeholder",
    "rank_records",
]
