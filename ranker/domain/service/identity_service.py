"""Federated identity resolution."""

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from ranker.domain.error import ValidationError
from ranker.domain.model import User
from ranker.domain.value import FederatedIdentity, UserId, Username

from .base import Service


class IdentityService(Service):
    """Turns identity provider assertions into User records."""

    def parse_assertion(self, assertion: Mapping[str, Any]) -> FederatedIdentity:
        """Validate a loosely-typed assertion payload.

        Args:
            assertion: Mapping with provider, uid, nickname and display_name

        Returns:
            Validated identity assertion

        Raises:
            ValidationError: If a required field is missing or blank
        """
        try:
            return FederatedIdentity.model_validate(dict(assertion))
        except PydanticValidationError as e:
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) for err in e.errors()
            )
            logfire.warn("Malformed identity assertion", fields=fields)
            raise ValidationError(f"Malformed identity assertion: {fields}")

    def resolve_from_federated_identity(self, identity: FederatedIdentity) -> User:
        """Build an unsaved User from a validated identity assertion.

        Persisting the result (and the username uniqueness check) is the
        caller's job, via UserService.register.

        Args:
            identity: Validated identity assertion

        Returns:
            New, unsaved user

        Raises:
            ValidationError: If the nickname is not a valid username
        """
        try:
            username = Username(identity.nickname)
        except PydanticValidationError as e:
            raise ValidationError(e.errors()[0]["msg"])

        return User(
            id=UserId(uuid4()),
            username=username,
            provider=identity.provider,
            uid=identity.uid,
            name=identity.display_name,
            created_at=datetime.now(timezone.utc),
        )
