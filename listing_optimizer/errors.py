"""Exceptions raised around the text-generation calls."""
from typing import Any, Optional


class ListingOptimizerError(Exception):
    """Base exception for listing optimizer errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class EmptyGenerationError(ListingOptimizerError):
    """The model returned no text."""


class GenerationServiceError(ListingOptimizerError):
    """Network, auth or quota failure from the generation API."""


class SchemaViolationError(ListingOptimizerError):
    """A JSON reply could not be decoded into the requested shape."""
