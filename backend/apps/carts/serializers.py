from rest_framework import serializers

from apps.catalog.serializers import ProductSerializer


class CartSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    userId = serializers.CharField(source="user_id", read_only=True)
    products = ProductSerializer(many=True, read_only=True)


class OrderSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    userId = serializers.CharField(source="user_id", read_only=True)
    products = ProductSerializer(many=True, read_only=True)
    totalPrice = serializers.ReadOnlyField(source="total_price")
