"""User aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError


@dataclass
class User:
    """A registered shopper.

    ``password`` is an opaque credential. It is stored but never shown.
    """

    id: int | None
    name: str
    email: str
    password: str = field(repr=False)

    def update_profile(self, name: str | None = None, email: str | None = None) -> None:
        """Change name and/or email; ``None`` leaves a field untouched."""
        if name is not None:
            if not name.strip():
                raise ValidationError("User name cannot be blank")
            self.name = name.strip()
        if email is not None:
            if not email.strip():
                raise ValidationError("User email cannot be blank")
            self.email = email.strip()
