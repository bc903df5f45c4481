"""Errors raised by outbound adapters (OAuth providers, external APIs)."""


class AdapterError(Exception):
    """Base error for anything that talks to a third-party service."""


class ProviderError(AdapterError):
    """An identity provider rejected or failed a request.

    Routes treat this as a failed sign-in, never as a server error.
    """
