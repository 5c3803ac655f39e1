"""Marketplace-specific exceptions.

Validation failures and missing records use Protean's own
``ValidationError`` and ``ObjectNotFoundError``; only authorization has no
framework counterpart.
"""


class AuthorizationError(Exception):
    """The actor is authenticated but not permitted to perform the action."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
