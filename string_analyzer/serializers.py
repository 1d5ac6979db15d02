import re
from collections.abc import Mapping

from django.utils import timezone
from rest_framework import serializers

from .errors import DuplicateValueError, MissingFieldError, TypeMismatchError
from .models import StringRecord
from .utils import analyze_string


class PropertyBundleSerializer(serializers.Serializer):
    length = serializers.IntegerField(read_only=True)
    is_palindrome = serializers.BooleanField(read_only=True)
    unique_characters = serializers.IntegerField(read_only=True)
    word_count = serializers.IntegerField(read_only=True)
    sha256_hash = serializers.CharField(read_only=True)
    character_frequency_map = serializers.DictField(
        child=serializers.IntegerField(), read_only=True)


class StringRecordSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    value = serializers.CharField(read_only=True)
    properties = PropertyBundleSerializer(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)

    def to_representation(self, instance):
        props = instance.properties

        return {
            'id': instance.id,
            'value': instance.value,
            'properties': {
                'length': props.length,
                'is_palindrome': props.is_palindrome,
                'unique_characters': props.unique_characters,
                'word_count': props.word_count,
                'sha256_hash': props.sha256_hash,
                'character_frequency_map': dict(props.character_frequency_map),
            },
            'created_at': instance.created_at.isoformat() if instance.created_at is not None else None,
        }


class StringAnalyzeSerializer(serializers.Serializer):
    value = serializers.CharField(allow_blank=True, trim_whitespace=False)

    def to_internal_value(self, data):
        # The value is stored verbatim, so CharField's coercion (numbers to
        # text, whitespace trimming) is bypassed on purpose.
        if not isinstance(data, Mapping) or data.get('value') is None:
            raise MissingFieldError('value')
        value = data['value']
        if not isinstance(value, str):
            raise TypeMismatchError('value', 'string')
        try:
            value.encode('utf-8')
        except UnicodeEncodeError:
            raise TypeMismatchError('value', 'valid UTF-8 string')
        return {'value': value}

    def create(self, validated_data):
        value = validated_data['value']
        repository = self.context['repository']

        with repository.atomic():
            # Check if already exists
            if repository.find_by_value(value) is not None:
                raise DuplicateValueError(value)

            record = StringRecord(
                value=value,
                properties=analyze_string(value),
                created_at=timezone.now(),
            )
            repository.insert(record)
        return record


class NonNegativeIntegerField(serializers.IntegerField):
    """IntegerField that only accepts plain digit strings such as "12"."""

    def __init__(self, **kwargs):
        kwargs.setdefault('min_value', 0)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if isinstance(data, str) and not re.fullmatch(r'[0-9]+', data):
            self.fail('invalid')
        return super().to_internal_value(data)


class StringFilterSerializer(serializers.Serializer):
    """Coerces raw query-parameter text into typed filter values."""

    is_palindrome = serializers.BooleanField(required=False)
    min_length = NonNegativeIntegerField(required=False)
    max_length = NonNegativeIntegerField(required=False)
    word_count = NonNegativeIntegerField(required=False)
    contains_character = serializers.CharField(
        required=False, min_length=1, max_length=1, trim_whitespace=False)
