import logging

from django.conf import settings
from rest_framework import authentication, exceptions, permissions

from food_ordering.accounts import services
from food_ordering.accounts.tokens import verify_token
from food_ordering.errors import InvalidToken, MissingToken

logger = logging.getLogger(__name__)


class CookieTokenAuthentication(authentication.BaseAuthentication):
    """
    Reads the signed session token from the `token` cookie.

    Never fails the request by itself: a missing or bad token leaves the
    caller anonymous, so public endpoints keep working with a stale cookie.
    The reason is kept on the request for IsSessionAuthenticated.
    """

    def authenticate(self, request):
        token = request.COOKIES.get(settings.SESSION_TOKEN_COOKIE_NAME)
        try:
            user_id = verify_token(token)
        except MissingToken:
            return None
        except InvalidToken as e:
            request.session_token_error = e.message
            return None

        user = services.find_by_id(user_id)
        if user is None or not user.is_active:
            logger.info("Session token for unknown user id=%s", user_id)
            request.session_token_error = InvalidToken.default_message
            return None
        return (user, token)

    def authenticate_header(self, request):
        # A non-empty challenge makes DRF answer 401 instead of 403.
        return 'Cookie realm="api"'


class IsSessionAuthenticated(permissions.BasePermission):
    """
    401 "Unauthorized" without a cookie, 401 "Invalid token" with a bad one.
    """

    def has_permission(self, request, view):
        if request.user and request.user.is_authenticated:
            return True
        failure = getattr(request, "session_token_error", None)
        if failure:
            raise exceptions.AuthenticationFailed(failure)
        return False
