from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    currency = serializers.CharField(read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'name',
            'currency',
            'created_at',
            'last_login',
            'preferences',
        ]
        read_only_fields = ['id', 'email', 'created_at', 'last_login']

    def validate_preferences(self, value):
        """Only known keys, with a three-letter currency and boolean dark mode."""
        if not isinstance(value, dict):
            raise serializers.ValidationError('Preferences must be an object.')

        unknown = set(value) - {'currency', 'dark_mode'}
        if unknown:
            raise serializers.ValidationError(
                f"Unknown preference(s): {', '.join(sorted(unknown))}"
            )

        currency = value.get('currency')
        if currency is not None:
            if not (isinstance(currency, str) and len(currency) == 3
                    and currency.isalpha() and currency.isupper()):
                raise serializers.ValidationError(
                    'Currency must be a three-letter code such as USD.'
                )

        dark_mode = value.get('dark_mode')
        if dark_mode is not None and not isinstance(dark_mode, bool):
            raise serializers.ValidationError('dark_mode must be true or false.')

        return value

    def update(self, instance, validated_data):
        """Merge preferences instead of replacing them."""
        preferences = validated_data.pop('preferences', None)
        if preferences is not None:
            instance.preferences = {**instance.preferences, **preferences}
        return super().update(instance, validated_data)


class UserRegistrationSerializer(serializers.Serializer):
    """
    Serializer for user registration.

    Missing or blank fields pass through as '' so registration can
    answer with a single "fill in all fields" error.
    """

    name = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    email = serializers.EmailField(required=False, allow_blank=True, default='')
    password = serializers.CharField(
        required=False,
        allow_blank=True,
        default='',
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )
