"""Unit tests for product validators.

Covers:
- validate_product: null candidate, null / empty / blank names, valid names.
- Check ordering (null entity before name).
- Stable, repeatable error kinds and messages.
"""

from __future__ import annotations

import pytest

from modules.core.exceptions import DomainValidationError
from modules.products.exceptions import (
    InvalidProductName,
    ProductIsNull,
    ProductValidationError,
)
from modules.products.models import Product
from modules.products.validators import validate_product, validate_product_name

pytestmark = pytest.mark.unit


class TestNullProduct:
    def test_none_raises_product_is_null(self):
        with pytest.raises(ProductIsNull) as excinfo:
            validate_product(None)
        assert excinfo.value.message == "Product cannot be null"
        assert excinfo.value.code == "null_entity"

    def test_is_a_domain_validation_error(self):
        with pytest.raises(DomainValidationError):
            validate_product(None)


class TestInvalidName:
    @pytest.mark.parametrize("name", [None, "", " ", "   ", "\t\n", "  \r\n  "])
    def test_null_or_blank_name_rejected(self, name):
        with pytest.raises(InvalidProductName) as excinfo:
            validate_product(Product(name=name))
        assert excinfo.value.message == "Product name cannot be null or empty"
        assert excinfo.value.code == "invalid_name"

    def test_name_helper_rejects_blank(self):
        with pytest.raises(InvalidProductName):
            validate_product_name("    ")


class TestValidProduct:
    @pytest.mark.parametrize("name", ["Widget", "  padded  ", "x", "Widget 2000"])
    def test_valid_name_passes(self, name):
        assert validate_product(Product(name=name)) is None

    def test_does_not_mutate_candidate(self):
        product = Product(name="  padded  ")
        validate_product(product)
        assert product.name == "  padded  "
        assert product.id is None
        assert product.created_at is None


class TestIdempotence:
    def test_same_invalid_candidate_yields_same_error(self):
        candidate = Product(name="")
        errors = []
        for _ in range(2):
            with pytest.raises(ProductValidationError) as excinfo:
                validate_product(candidate)
            errors.append(excinfo.value)

        assert type(errors[0]) is type(errors[1])
        assert errors[0].message == errors[1].message
