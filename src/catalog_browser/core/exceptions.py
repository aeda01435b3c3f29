"""Errors raised at the document fetch boundary."""


class CatalogError(Exception):
    """Base error for catalog loading."""


class FetchError(CatalogError):
    """Transport failure or non-2xx response while fetching the document."""


class DecodeError(CatalogError):
    """Document body could not be decoded as text."""
