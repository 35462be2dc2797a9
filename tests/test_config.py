#tests\test_config.py

"""Test client configuration validation."""

import pytest

from piston_client import DEFAULT_BASE_URL, ClientConfigError, PistonClient
from piston_client.client.config import ClientConfig, validate_client_config


class TestClientConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        config = ClientConfig()

        assert config.base_url == DEFAULT_BASE_URL == "https://emkc.org/api/v2/piston"
        assert config.retries == 3
        assert config.request_timeout is None
        assert config.limits() == {}

    def test_config_is_frozen(self):
        config = ClientConfig()

        with pytest.raises(AttributeError):
            config.retries = 5

    def test_limits_omit_unset(self):
        config = ClientConfig(run_timeout=3000, compile_memory_limit=0)

        assert config.limits() == {"run_timeout": 3000, "compile_memory_limit": 0}

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"base_url": ""},
            {"base_url": "emkc.org/api/v2/piston"},
            {"base_url": "ftp://emkc.org"},
            {"retries": 0},
            {"retries": -1},
            {"retries": True},
            {"run_timeout": -1},
            {"compile_cpu_time": 1.5},
            {"request_timeout": 0},
        ],
    )
    def test_invalid_config_fails(self, kwargs):
        with pytest.raises(ClientConfigError):
            validate_client_config(ClientConfig(**kwargs))

    def test_client_validates_on_construction(self):
        with pytest.raises(ClientConfigError):
            PistonClient(retries=0)

    def test_client_exposes_config(self, session):
        client = PistonClient(base_url="http://localhost:2000/api/v2", run_timeout=1000, session=session)

        assert client.config.base_url == "http://localhost:2000/api/v2"
        assert client.config.run_timeout == 1000
