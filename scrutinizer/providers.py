"""Source-hosting providers known to the service."""

from enum import Enum

from scrutinizer.exceptions import ValidationError


class Provider(str, Enum):
    """Hosting platform of a repository, encoded as a one-letter path segment."""

    GITHUB = "g"
    BITBUCKET = "b"

    @property
    def tag(self) -> str:
        """Literal URL segment for this provider."""
        return self.value

    @classmethod
    def parse(cls, value: "Provider | str") -> "Provider":
        """
        Coerce a provider or its tag into a Provider.

        Raises:
            ValidationError: If the value is not a known provider tag
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            tags = ", ".join(repr(p.value) for p in cls)
            raise ValidationError(
                f"Unknown provider {value!r}. Must be one of {tags}"
            ) from None
