import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from artfolio_client.config import ClientConfig, ConfigError, load_client_config


def test_base_url_joins_port():
    assert ClientConfig("http://localhost", 3000).base_url == "http://localhost:3000"
    assert ClientConfig("https://api.example.com/").base_url == "https://api.example.com"


def test_load_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"SERVER_URL": "http://localhost", "SERVER_PORT": "3000"}))
    config = load_client_config(str(path))
    assert config == ClientConfig("http://localhost", 3000)


def test_missing_server_url(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"SERVER_PORT": 3000}))
    with pytest.raises(ConfigError):
        load_client_config(str(path))


def test_invalid_port():
    with pytest.raises(ConfigError):
        ClientConfig.from_dict({"SERVER_URL": "http://localhost", "SERVER_PORT": "abc"})


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_client_config(str(tmp_path / "nope.json"))


@patch("artfolio_client.config.requests.get")
def test_load_from_url(mock_get):
    response = MagicMock()
    response.json.return_value = {"SERVER_URL": "http://api", "SERVER_PORT": 8080}
    mock_get.return_value = response
    config = load_client_config("http://api:8080/config.json")
    assert config.base_url == "http://api:8080"
    mock_get.assert_called_once_with("http://api:8080/config.json", timeout=15)


@patch("artfolio_client.config.requests.get")
def test_unreachable_url(mock_get):
    mock_get.side_effect = requests.ConnectionError("refused")
    with pytest.raises(ConfigError):
        load_client_config("http://api:8080/config.json")
