"""Email value object."""

from dataclasses import dataclass

from stockroom.domain.user.exceptions import InvalidEmailError


@dataclass(frozen=True)
class Email:
    """Value object for an email address that passed the "@" check.

    The check is syntactic only, not RFC validation. The value is kept
    verbatim so lookups stay exact-match.
    """

    value: str

    def __post_init__(self) -> None:
        if "@" not in self.value:
            raise InvalidEmailError(self.value)

    def __str__(self) -> str:
        return self.value
