from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.api.validation import resolve_request_user
from apps.common import get_logger
from apps.users.container import build_user_service
from .container import build_cart_service
from .serializers import CartSerializer, OrderSerializer

logger = get_logger(__name__).bind(component="carts", layer="view")

USER_HEADER_PARAMETER = OpenApiParameter(
    "x-user-id",
    str,
    OpenApiParameter.HEADER,
    required=True,
    description="Id of a registered user, as returned by /api/register",
)


class UserScopedView(APIView):
    """Base for views acting on behalf of the user named by ``x-user-id``."""

    requires_user = True
    user_service = build_user_service()

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        # Normally resolved by RequestValidationMiddleware already.
        if getattr(request, "validated_user_id", None) is None:
            error = resolve_request_user(request, type(self))
            if error:
                raise error


@extend_schema(tags=["Carts"], parameters=[USER_HEADER_PARAMETER])
class CartItemView(UserScopedView):
    service = build_cart_service()
    log = logger.bind(view="CartItemView")

    @extend_schema(
        summary="Add product to cart",
        request=None,
        parameters=[OpenApiParameter("product_id", str, OpenApiParameter.PATH)],
        responses={
            200: CartSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request, product_id: str):
        user_id = request.validated_user_id
        self.log.debug("Handling add to cart", user_id=user_id, product_id=product_id)
        cart, error = self.service.add_product(user_id, product_id)
        if error:
            return error.to_response()
        return Response(CartSerializer(cart).data)

    @extend_schema(
        summary="Remove product from cart",
        parameters=[OpenApiParameter("product_id", str, OpenApiParameter.PATH)],
        responses={
            200: CartSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def delete(self, request, product_id: str):
        user_id = request.validated_user_id
        self.log.debug("Handling remove from cart", user_id=user_id, product_id=product_id)
        cart, error = self.service.remove_product(user_id, product_id)
        if error:
            return error.to_response()
        return Response(CartSerializer(cart).data)


@extend_schema(tags=["Carts"], parameters=[USER_HEADER_PARAMETER])
class CartCheckoutView(CartItemView):
    """
    POST checks the cart out. PUT and DELETE on the same path treat
    "checkout" as a product id, like any other cart item path.
    """

    log = logger.bind(view="CartCheckoutView")

    @extend_schema(
        summary="Checkout cart",
        request=None,
        responses={
            200: OrderSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            401: OpenApiResponse(response=ErrorResponseSerializer),
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request, product_id: str = "checkout"):
        user_id = request.validated_user_id
        self.log.info("Handling checkout", user_id=user_id)
        order, error = self.service.checkout(user_id)
        if error:
            return error.to_response()
        return Response(OrderSerializer(order).data)
