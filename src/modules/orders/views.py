"""Order API views.

Exposes the ``OrderService`` via HTTP using a DRF ViewSet.  Views do not
catch domain exceptions: ``modules.core.exceptions.api_exception_handler``
turns them into the error envelope.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.viewsets import GenericViewSet

from modules.core.serializers import ErrorResponseSerializer
from modules.orders.dtos import OrderRequestDTO
from modules.orders.mappers import OrderMapper
from modules.orders.repositories.mongo_repository import OrderMongoRepository
from modules.orders.serializers import OrderRequestSerializer, OrderResponseSerializer
from modules.orders.services import OrderService


class OrderViewSet(GenericViewSet):
    """ViewSet for Order operations.

    Uses ``OrderService`` with an injected repository (DIP).  Supports
    create, list, retrieve and full update; there is no delete.
    """

    serializer_class = OrderResponseSerializer
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderMongoRepository(),
            mapper=OrderMapper(),
        )

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    @extend_schema(
        request=OrderRequestSerializer,
        responses={201: OrderResponseSerializer, 400: ErrorResponseSerializer},
    )
    def create(self, request: Request) -> Response:
        """POST /orders

        Returns 201 with a ``Location`` header pointing at the new order.
        """
        dto = _parse_order_request(request)
        order = self._service.create_order(dto)

        location = reverse("order-detail", kwargs={"pk": order.id}, request=request)
        out = OrderResponseSerializer(order)
        return Response(
            out.data,
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses={200: OrderResponseSerializer(many=True)})
    def list(self, request: Request) -> Response:
        """GET /orders"""
        orders = self._service.get_all_orders()
        serializer = OrderResponseSerializer(orders, many=True)
        return Response(serializer.data)

    @extend_schema(
        responses={200: OrderResponseSerializer, 404: ErrorResponseSerializer}
    )
    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /orders/{pk}"""
        order = self._service.get_order_by_id(pk)
        serializer = OrderResponseSerializer(order)
        return Response(serializer.data)

    # ------------------------------------------------------------------
    # Update (full replacement)
    # ------------------------------------------------------------------

    @extend_schema(
        request=OrderRequestSerializer,
        responses={
            200: OrderResponseSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
    )
    def update(self, request: Request, pk: str) -> Response:
        """PUT /orders/{pk}

        The path id wins over any ``id`` in the body.
        """
        dto = _parse_order_request(request)
        order = self._service.update_order(pk, dto)
        serializer = OrderResponseSerializer(order)
        return Response(serializer.data)


def _parse_order_request(request: Request) -> OrderRequestDTO:
    serializer = OrderRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    return serializer.to_dto()
