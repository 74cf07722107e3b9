"""Cryptomania - in-memory cryptocurrency portfolio manager."""

from cryptomania.config import PRODUCT_VERSION

__version__ = PRODUCT_VERSION
