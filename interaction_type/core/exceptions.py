"""
Framework exceptions.

Empty or missing message text is never an error: it is the designed
"nothing to dispatch" state. Errors are reserved for structurally
invalid components.
"""


class InteractionTypeError(Exception):
    """Base class for all framework errors."""


class InvalidComponentError(InteractionTypeError, TypeError):
    """A required component (role, relationship, entity, message) is missing or of the wrong type."""


class RoleCapabilityError(InteractionTypeError):
    """A role was asked to perform a behaviour it does not provide."""
