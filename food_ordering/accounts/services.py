"""
food_ordering.accounts.services
Credential store on top of django.contrib.auth: the normalized email doubles
as the username, the display name lives in first_name.
"""
from __future__ import annotations

import logging
from typing import Optional

from django.contrib.auth import authenticate as django_authenticate
from django.contrib.auth.models import User
from django.db import IntegrityError, transaction

from food_ordering.errors import DuplicateEmail, InvalidCredentials

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 150  # auth.User.first_name


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def register(email: str, password: str, name: str = "") -> User:
    """Create a user; raises DuplicateEmail when the email is taken."""
    email = normalize_email(email)
    name = (name or "").strip()[:NAME_MAX_LENGTH]

    if User.objects.filter(username=email).exists():
        raise DuplicateEmail()

    try:
        with transaction.atomic():
            user = User.objects.create_user(
                username=email, email=email, password=password, first_name=name
            )
    except IntegrityError:
        # Lost a race against a concurrent registration of the same email.
        raise DuplicateEmail()

    logger.info("Registered user id=%s email=%s", user.pk, email)
    return user


def authenticate(email: str, password: str) -> User:
    """
    Same failure for unknown email and wrong password. ModelBackend hashes a
    dummy password for unknown users, so both paths take the same time.
    """
    email = normalize_email(email)
    user = django_authenticate(username=email, password=password)
    if user is None:
        logger.warning("Failed login for email=%s", email)
        raise InvalidCredentials()
    logger.info("User %s logged in", email)
    return user


def find_by_id(user_id: int) -> Optional[User]:
    return User.objects.filter(pk=user_id).first()


def public_profile(user: User) -> dict:
    return {"id": user.pk, "name": user.first_name, "email": user.email}
