"""Client email address value object."""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class Email:
    """Validated, normalized email address.

    Validation is delegated to email-validator (syntax only, no DNS
    lookups). The stored value is the library's normalized form, so the
    domain part is always lowercase.

    Attributes:
        value: Normalized email address.

    Raises:
        ValueError: If the address is malformed.

    Example:
        >>> Email("Anna@Example.COM").value
        'Anna@example.com'
    """

    value: str

    def __post_init__(self) -> None:
        try:
            validated = validate_email(self.value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e
        object.__setattr__(self, "value", validated.normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
