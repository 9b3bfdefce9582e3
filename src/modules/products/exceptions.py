"""Product domain exceptions.

Raised by the validators before anything reaches the store.  Views let
them propagate; the global exception handler renders them as
``400 {"error": <message>}``.
"""

from __future__ import annotations

from modules.core.exceptions import DomainValidationError


class ProductValidationError(DomainValidationError):
    """A product candidate failed validation."""


class ProductIsNull(ProductValidationError):
    """No product was supplied at all."""

    code = "null_entity"
    default_message = "Product cannot be null"


class InvalidProductName(ProductValidationError):
    """The product name is missing or only whitespace."""

    code = "invalid_name"
    default_message = "Product name cannot be null or empty"
