from rest_framework import serializers

PASSWORD_MIN_LENGTH = 6


class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField(max_length=150)
    password = serializers.CharField(
        min_length=PASSWORD_MIN_LENGTH,
        trim_whitespace=False,
        error_messages={"min_length": "Password must be at least 6 characters."},
    )
    name = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="", max_length=150)


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)
