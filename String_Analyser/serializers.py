from rest_framework import serializers

from .exceptions import ConflictingFilters
from .filters import FilterSet


class StrictCharField(serializers.CharField):
    """CharField that refuses numbers and other JSON types instead of coercing them."""
    default_error_messages = {
        'invalid_type': 'Invalid data type for "value" (must be string).',
    }

    def to_internal_value(self, data):
        # false and 0 count as a missing value, like an empty string
        if isinstance(data, (bool, int, float)) and not data:
            self.fail('blank')
        if not isinstance(data, str):
            self.fail('invalid_type')
        return super().to_internal_value(data)


class StringRecordSerializer(serializers.Serializer):
    """Read-only representation of a StringRecord."""

    def to_representation(self, instance):
        return {
            'id': instance.id,
            'value': instance.value,
            'properties': instance.properties.as_dict(),
            'created_at': instance.created_at.isoformat() if instance.created_at is not None else None,
        }


class StringAnalyzeSerializer(serializers.Serializer):
    value = StrictCharField(trim_whitespace=False)

    def validate(self, attrs):
        unknown = set(self.initial_data) - set(self.fields)
        if unknown:
            raise serializers.ValidationError(
                {field: 'Unexpected field.' for field in sorted(unknown)})
        return attrs

    def create(self, validated_data):
        store = self.context['store']
        return store.insert(validated_data['value'])


class StringFilterSerializer(serializers.Serializer):
    is_palindrome = serializers.BooleanField(required=False)
    min_length = serializers.IntegerField(required=False, min_value=0)
    max_length = serializers.IntegerField(required=False, min_value=0)
    word_count = serializers.IntegerField(required=False, min_value=0)
    contains_character = serializers.CharField(
        required=False, min_length=1, max_length=1, trim_whitespace=False)

    def validate(self, attrs):
        unknown = set(self.initial_data) - set(self.fields)
        if unknown:
            raise serializers.ValidationError(
                {field: 'Unknown query parameter.' for field in sorted(unknown)})

        try:
            FilterSet.from_params(**attrs)
        except ConflictingFilters as exc:
            raise serializers.ValidationError(exc.message)
        return attrs

    def to_filter_set(self) -> FilterSet:
        return FilterSet.from_params(**self.validated_data)


class NaturalLanguageQuerySerializer(serializers.Serializer):
    query = serializers.CharField()
