"""Access-token credential holder."""

from dataclasses import dataclass

from scrutinizer.exceptions import MissingCredentialError


@dataclass(frozen=True)
class Auth:
    """
    Holds the access token sent with every request.

    The token is read-only after construction, so a single instance can be
    shared between threads. It is never written anywhere by the SDK.
    """

    access_token: str

    def validate(self) -> None:
        """
        Make sure a usable token is set.

        Raises:
            MissingCredentialError: If the token is empty
        """
        if not self.access_token or not self.access_token.strip():
            raise MissingCredentialError()

    def __repr__(self) -> str:
        state = "set" if self.access_token else "missing"
        return f"Auth(access_token=<{state}>)"
