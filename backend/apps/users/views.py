from collections.abc import Mapping

from rest_framework.exceptions import UnsupportedMediaType
from rest_framework.views import APIView
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from .container import build_user_service
from .serializers import RegisterSerializer, UserSerializer

logger = get_logger(__name__).bind(component="users", layer="view")


@extend_schema(tags=["Users"])
class RegisterView(APIView):
    service = build_user_service()
    log = logger.bind(view="RegisterView")

    @extend_schema(
        summary="Register user",
        request=RegisterSerializer,
        responses={
            200: UserSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def post(self, request):
        try:
            data = request.data
        except UnsupportedMediaType:
            # Only JSON bodies are read; form posts arrive without credentials.
            self.log.debug("Ignoring non-JSON body", content_type=request.content_type)
            data = None
        # A JSON body that is not an object carries no credentials.
        payload = data if isinstance(data, Mapping) else {}
        dto, error = self.service.register(payload)
        if error:
            self.log.info("Registration failed", reason=error.message)
            return error.to_response()
        self.log.info("User registered via API", user_id=dto.id)
        return Response(UserSerializer(dto).data)
