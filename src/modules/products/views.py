"""Product API views.

Exposes ``ProductService`` over HTTP with a DRF ViewSet.  Validation
errors raised by the service are *not* caught here: they propagate to
the global exception handler (``modules.core.exceptions``), which
renders them as ``400 {"error": ...}``.  A missing product is not an
error and is answered with an empty 404.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema, extend_schema_view
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.dtos import CreateProductDTO
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ErrorSerializer, ProductSerializer
from modules.products.services import ProductService


@extend_schema_view(
    list=extend_schema(
        summary="Get all products",
        description="Retrieves a list of all products.",
        responses={200: ProductSerializer(many=True)},
    ),
    retrieve=extend_schema(
        summary="Get product by ID",
        description="Retrieves a specific product by its ID.",
        responses={
            200: ProductSerializer,
            404: OpenApiResponse(description="Product not found"),
        },
    ),
    create=extend_schema(
        summary="Create a new product",
        description="Creates a new product with the provided name.",
        request=CreateProductDTO,
        responses={
            201: ProductSerializer,
            400: OpenApiResponse(ErrorSerializer, description="Invalid product data"),
        },
    ),
)
@extend_schema(tags=["Products"])
class ProductViewSet(GenericViewSet):
    """List, retrieve and create products.

    Uses ``ProductService`` with ``ProductDjangoRepository``; all ORM
    access goes through the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    pagination_class = None
    # Any single path segment reaches retrieve; non-integer ids are misses.
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        product = self._service.get_product(pk)
        if product is None:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    def create(self, request: Request) -> Response:
        """POST /api/products

        A JSON ``null`` body is passed on as a missing product.
        """
        payload = request.data
        candidate = None
        if payload is not None:
            candidate = CreateProductDTO.model_validate(payload).to_entity()

        product = self._service.create_product(candidate)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)
