"""
Serializers for user accounts and the session authentication endpoints.
"""

from django.conf import settings
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password

from rest_framework import serializers

from .image_utils import ImageProcessor

User = get_user_model()


def validate_avatar_file(value):
    is_valid, error = ImageProcessor.validate_image(value, settings.AVATAR_MAX_SIZE)
    if not is_valid:
        raise serializers.ValidationError(error)
    return value


class UserSerializer(serializers.ModelSerializer):
    """
    Serializer for the current user's profile.

    The password is write-only and hashed on save; ``id`` and ``role``
    cannot be changed through the API.
    """

    password = serializers.CharField(
        write_only=True, required=False, validators=[validate_password]
    )
    avatar = serializers.ImageField(
        required=False, allow_null=True, validators=[validate_avatar_file]
    )

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "name",
            "email",
            "avatar",
            "role",
            "password",
        ]
        read_only_fields = ["id", "role"]

    def update(self, instance, validated_data):
        password = validated_data.pop("password", None)
        user = super().update(instance, validated_data)
        if password:
            user.set_password(password)
            user.save(update_fields=["password"])
        return user


class UserRegistrationSerializer(serializers.ModelSerializer):
    """
    Serializer for user registration.
    """

    username = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, required=True, validators=[validate_password])
    confirmPassword = serializers.CharField(write_only=True, required=True)

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "name",
            "email",
            "avatar",
            "role",
            "password",
            "confirmPassword",
        ]
        read_only_fields = ["id", "avatar", "role"]

    def validate_username(self, value):
        if User.objects.filter(username=value).exists():
            raise serializers.ValidationError("Username already exists")
        return value

    def validate_email(self, value):
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("Email already exists")
        return value

    def validate(self, attrs):
        if attrs["password"] != attrs["confirmPassword"]:
            raise serializers.ValidationError({"confirmPassword": "Passwords don't match"})
        return attrs

    def create(self, validated_data):
        validated_data.pop("confirmPassword")
        user = User.objects.create_user(**validated_data)
        return user


class LoginSerializer(serializers.Serializer):
    """
    Credentials for session login. ``username`` may also be an email address.
    """

    username = serializers.CharField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)
