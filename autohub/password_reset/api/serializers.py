from rest_framework import serializers


class ForgotPasswordSerializer(serializers.Serializer):
    email = serializers.EmailField()


class VerifyResetTokenSerializer(serializers.Serializer):
    token = serializers.CharField()
    email = serializers.EmailField()


class ResetPasswordSerializer(serializers.Serializer):
    token = serializers.CharField()
    email = serializers.EmailField()
    newPassword = serializers.CharField(
        source="new_password",
        write_only=True,
        min_length=8,
        trim_whitespace=False,
        error_messages={"min_length": "Password must be at least 8 characters"},
    )


class MessageSerializer(serializers.Serializer):
    message = serializers.CharField()
