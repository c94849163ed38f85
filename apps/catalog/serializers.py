from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    sku = serializers.CharField()
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=8, decimal_places=2)


class ReleaseSerializer(serializers.Serializer):
    version = serializers.CharField()
    channel = serializers.ChoiceField(choices=["stable", "beta"])
    notes = serializers.CharField(allow_blank=True)
