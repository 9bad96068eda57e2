from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    id = serializers.ReadOnlyField()
    name = serializers.CharField(read_only=True)
    price = serializers.ReadOnlyField()
    description = serializers.CharField(read_only=True)
    category = serializers.CharField(read_only=True)
    image = serializers.CharField(read_only=True)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        extra = getattr(instance, "extra", None) or {}
        for key, value in extra.items():
            data.setdefault(key, value)
        return data
