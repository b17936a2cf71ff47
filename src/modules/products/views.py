"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Every action runs its request rule set first and short-circuits with
HTTP 400 and a ``[{field, message}]`` body on failure.  Domain
exceptions are translated into HTTP status codes here; anything
unexpected propagates to the project exception handler (HTTP 500).
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.validation import FieldError, errors_from_pydantic
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.filters import ProductFilter
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService
from modules.products.validators import (
    parse_boolean,
    validate_availability,
    validate_create,
    validate_id,
    validate_update,
)

NOT_FOUND_MESSAGE = "Product not found"
DELETED_MESSAGE = "Product deleted"


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    ``queryset`` is declared for schema generation only; all ORM
    access goes through the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    pagination_class = None
    # Dotted ids must reach the id rule instead of DRF's format suffix.
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        filterset = ProductFilter(request.query_params)
        if not filterset.is_valid():
            return self._invalid(
                FieldError(field=field, message=message)
                for field, messages in filterset.errors.items()
                for message in messages
            )
        products = self._service.list_products(filterset.lookups() or None)
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        result = validate_id(pk)
        if not result.ok:
            return self._invalid(result.errors)
        try:
            product = self._service.get_product(int(pk))
        except ProductNotFound:
            return self._not_found()
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Patch / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        data = request.data
        result = validate_create(data)
        if not result.ok:
            return self._invalid(result.errors)

        try:
            dto = CreateProductDTO(
                name=data.get("name"),
                price=_strip(data.get("price")),
            )
        except PydanticValidationError as exc:
            return self._invalid(errors_from_pydantic(exc))

        product = self._service.create_product(dto)
        out = ProductSerializer(product)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/{pk}"""
        data = request.data
        result = validate_update(pk, data)
        if not result.ok:
            return self._invalid(result.errors)

        try:
            dto = UpdateProductDTO(
                name=data.get("name"),
                price=_strip(data.get("price")),
                availability=parse_boolean(data.get("availability")),
            )
        except PydanticValidationError as exc:
            return self._invalid(errors_from_pydantic(exc))

        try:
            product = self._service.update_product(int(pk), dto)
        except ProductNotFound:
            return self._not_found()
        return Response(ProductSerializer(product).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/products/{pk}

        Toggles availability, or sets it when the body carries
        ``{"availability": <bool>}``.
        """
        data = request.data
        result = validate_availability(pk, data)
        if not result.ok:
            return self._invalid(result.errors)

        availability = None
        if isinstance(data, Mapping) and "availability" in data:
            availability = parse_boolean(data["availability"])

        try:
            product = self._service.set_availability(int(pk), availability)
        except ProductNotFound:
            return self._not_found()
        return Response(ProductSerializer(product).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk}"""
        result = validate_id(pk)
        if not result.ok:
            return self._invalid(result.errors)
        try:
            self._service.delete_product(int(pk))
        except ProductNotFound:
            return self._not_found()
        return Response(DELETED_MESSAGE)

    # ------------------------------------------------------------------
    # Responses
    # ------------------------------------------------------------------

    @staticmethod
    def _invalid(errors: Iterable[FieldError]) -> Response:
        body: List[dict] = [error.to_dict() for error in errors]
        return Response(body, status=status.HTTP_400_BAD_REQUEST)

    @staticmethod
    def _not_found() -> Response:
        return Response(
            {"error": NOT_FOUND_MESSAGE},
            status=status.HTTP_404_NOT_FOUND,
        )
