from rest_framework import serializers


class RegisterSerializer(serializers.Serializer):
    """Request body of /api/register; checked by UserService.register."""

    email = serializers.CharField()
    password = serializers.CharField(write_only=True)


class UserSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    email = serializers.CharField(read_only=True)
