"""Client domain error constants."""


class ClientError:
    """Client error constants.

    Validation messages are raised as ValueError from ``__post_init__``;
    transition messages are returned in Failure results.
    """

    # Validation errors
    NAME_REQUIRED = "Client name is required"
    NAME_TOO_LONG = "Client name cannot exceed 255 characters"
    INVALID_ACCESS_KEY = "Client access key must be 64 hexadecimal characters"

    # State transition errors
    ALREADY_ACTIVE = "Client is already active"
    ALREADY_BLOCKED = "Client is already blocked"
    CLIENT_BLOCKED = "Blocked client cannot be activated, unblock first"
