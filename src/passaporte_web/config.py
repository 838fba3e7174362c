import dataclasses
import enum
import os
import typing

from .exceptions import ConfigurationError

DEFAULT_URL = "https://app.passaporteweb.com.br"
DEFAULT_USER_AGENT = "passaporte_web (python)"
DEFAULT_TIMEOUT = 30.0

ENVIRON_PREFIX = "PASSAPORTE_WEB_"


class AuthType(enum.Enum):
    """
    Selects the credential a request is made under. The value is handed to the
    transport unmodified.
    """

    USER = "user"
    APPLICATION = "application"


@dataclasses.dataclass
class Configuration:
    url: str = DEFAULT_URL
    user_agent: str = DEFAULT_USER_AGENT
    application_token: typing.Optional[str] = None
    application_secret: typing.Optional[str] = None
    user_token: typing.Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    def credentials_for(self, auth: AuthType) -> typing.Tuple[str, str]:
        """
        Returns the HTTP basic authentication pair for the given credential.

        :param AuthType auth: the credential to use.
        :return: a ``(username, password)`` tuple.
        """
        if self.application_token is None:
            raise ConfigurationError("application_token is not configured")
        if auth is AuthType.APPLICATION:
            if self.application_secret is None:
                raise ConfigurationError("application_secret is not configured")
            return (self.application_token, self.application_secret)
        elif auth is AuthType.USER:
            if self.user_token is None:
                raise ConfigurationError("user_token is not configured")
            return (self.application_token, self.user_token)
        raise AssertionError("should never get here!")

    @classmethod
    def from_environ(
        cls, environ: typing.Optional[typing.Mapping[str, str]] = None
    ) -> "Configuration":
        if environ is None:
            environ = os.environ

        def get(name: str) -> typing.Optional[str]:
            return environ.get(ENVIRON_PREFIX + name) or None

        timeout = get("TIMEOUT")
        try:
            timeout_value = float(timeout) if timeout is not None else DEFAULT_TIMEOUT
        except ValueError:
            raise ConfigurationError(f"{ENVIRON_PREFIX}TIMEOUT is not a number: {timeout!r}")

        return cls(
            url=get("URL") or DEFAULT_URL,
            user_agent=get("USER_AGENT") or DEFAULT_USER_AGENT,
            application_token=get("APPLICATION_TOKEN"),
            application_secret=get("APPLICATION_SECRET"),
            user_token=get("USER_TOKEN"),
            timeout=timeout_value,
        )
