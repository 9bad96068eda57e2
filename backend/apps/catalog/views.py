from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from .container import build_product_service
from .serializers import ProductSerializer

logger = get_logger(__name__).bind(component="catalog", layer="view")


@extend_schema(tags=["Catalog"])
class ProductListView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="List products",
        responses={200: ProductSerializer(many=True)},
    )
    def get(self, request):
        self.log.debug("Handling product list request")
        products = self.service.list_products()
        return Response(ProductSerializer(products, many=True).data)


@extend_schema(tags=["Catalog"])
class ProductDetailView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product",
        parameters=[OpenApiParameter("product_id", str, OpenApiParameter.PATH)],
        responses={
            200: ProductSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, product_id: str):
        self.log.debug("Fetching product detail", product_id=product_id)
        product, error = self.service.get_product(product_id)
        if error:
            return error.to_response()
        return Response(ProductSerializer(product).data)
