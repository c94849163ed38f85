from collections.abc import Mapping

from rest_framework import serializers

# Keys are matched after lower-casing and dropping underscores, so both
# ``http_verb`` and the camel-cased ``httpVerb`` land on the same field.
FIELD_ALIASES = {
    "httpverb": "http_verb",
    "endpoint": "endpoint",
    "header": "header",
    "value": "value",
    "name": "name",
}


class RuleSerializer(serializers.Serializer):
    header = serializers.CharField()
    value = serializers.CharField(trim_whitespace=False)

    def to_internal_value(self, data):
        if isinstance(data, Mapping):
            data = {
                FIELD_ALIASES.get(str(key).replace("_", "").lower(), key): value
                for key, value in data.items()
            }
        return super().to_internal_value(data)


class RouteRuleSerializer(RuleSerializer):
    """Validates one ``INVISIBLE_API_CONFIGURATIONS`` entry."""

    http_verb = serializers.CharField(max_length=16)
    endpoint = serializers.CharField()

    def validate_http_verb(self, value):
        return value.upper()

    def validate_endpoint(self, value):
        if not value.startswith("/"):
            raise serializers.ValidationError("Endpoint must start with '/'.")
        return value


class ProfileRuleSerializer(RuleSerializer):
    """Validates one ``INVISIBLE_API_PROFILES`` entry."""

    name = serializers.CharField()
