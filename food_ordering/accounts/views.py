from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from food_ordering.accounts import services
from food_ordering.accounts.serializers import LoginSerializer, RegisterSerializer
from food_ordering.accounts.tokens import clear_session_cookie, set_session_cookie


class RegisterView(APIView):
    """POST /api/auth/register → create the account and log it in."""
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        ser = RegisterSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        user = services.register(data["email"], data["password"], data.get("name") or "")
        resp = Response(
            {"message": "Registered", "user": services.public_profile(user)},
            status=status.HTTP_201_CREATED,
        )
        return set_session_cookie(resp, user.pk)


class LoginView(APIView):
    """POST /api/auth/login"""
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        ser = LoginSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        user = services.authenticate(ser.validated_data["email"], ser.validated_data["password"])
        resp = Response({"message": "Logged in!", "user": services.public_profile(user)})
        return set_session_cookie(resp, user.pk)


class LogoutView(APIView):
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        return clear_session_cookie(Response({"message": "Logged out"}))


class MeView(APIView):
    """
    GET /api/auth/me
    Never fails on a bad session: anonymous callers get {"loggedIn": false}.
    """

    def get(self, request, *args, **kwargs):
        if not request.user.is_authenticated:
            return Response({"loggedIn": False})
        return Response({"loggedIn": True, "user": services.public_profile(request.user)})
