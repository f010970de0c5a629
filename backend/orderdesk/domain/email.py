"""
Email value object

An Email can only be constructed from a syntactically valid address.
The address is kept exactly as given (no case folding or IDNA rewriting),
so uniqueness checks compare what the customer typed.
"""
from email_validator import EmailNotValidError, validate_email

from orderdesk.core.errors import ValidationFailed

MAX_EMAIL_LENGTH = 320


class Email(str):
    """A validated email address. Behaves as a plain str everywhere else."""

    __slots__ = ()

    def __new__(cls, value: str) -> "Email":
        if value is None or not value.strip():
            raise ValidationFailed(
                "Email cannot be null or empty.",
                errors={"email": ["Email cannot be null or empty."]},
            )
        if len(value) > MAX_EMAIL_LENGTH or not cls.is_valid(value):
            raise ValidationFailed(
                "Invalid email format.",
                errors={"email": ["Invalid email format."]},
            )
        return super().__new__(cls, value)

    @staticmethod
    def is_valid(value: str) -> bool:
        try:
            result = validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return False
        # Reject inputs the parser had to rewrite to accept
        return result.original == value and result.normalized.lower() == value.lower()

    @property
    def value(self) -> str:
        return str(self)
