import pytest

from ..config import AuthType, Configuration
from ..exceptions import ConfigurationError


def test_defaults():
    config = Configuration()
    assert config.url == "https://app.passaporteweb.com.br"
    assert config.timeout == 30.0


def test_from_environ():
    config = Configuration.from_environ(
        {
            "PASSAPORTE_WEB_URL": "https://sandbox.example.com",
            "PASSAPORTE_WEB_APPLICATION_TOKEN": "app-token",
            "PASSAPORTE_WEB_APPLICATION_SECRET": "app-secret",
            "PASSAPORTE_WEB_USER_TOKEN": "user-token",
            "PASSAPORTE_WEB_TIMEOUT": "5",
            "UNRELATED": "x",
        }
    )
    assert config == Configuration(
        url="https://sandbox.example.com",
        application_token="app-token",
        application_secret="app-secret",
        user_token="user-token",
        timeout=5.0,
    )


def test_from_environ_empty():
    assert Configuration.from_environ({"PASSAPORTE_WEB_URL": ""}) == Configuration()


def test_from_environ_invalid_timeout():
    with pytest.raises(ConfigurationError):
        Configuration.from_environ({"PASSAPORTE_WEB_TIMEOUT": "soon"})


class TestCredentialsFor:
    @pytest.fixture
    def config(self):
        return Configuration(
            application_token="app-token",
            application_secret="app-secret",
            user_token="user-token",
        )

    def test_application(self, config):
        assert config.credentials_for(AuthType.APPLICATION) == ("app-token", "app-secret")

    def test_user(self, config):
        assert config.credentials_for(AuthType.USER) == ("app-token", "user-token")

    @pytest.mark.parametrize(
        "missing, auth",
        [
            ("application_token", AuthType.APPLICATION),
            ("application_token", AuthType.USER),
            ("application_secret", AuthType.APPLICATION),
            ("user_token", AuthType.USER),
        ],
    )
    def test_missing(self, config, missing, auth):
        setattr(config, missing, None)
        with pytest.raises(ConfigurationError):
            config.credentials_for(auth)
