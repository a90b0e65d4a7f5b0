import pytest
from pydantic import ValidationError

from payments_client.config import (
    DEFAULT_API_BASE,
    ClientConfig,
    config_from_env,
    load_client_config,
)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "client_config.yml"
    path.write_text(
        "api_key: sk_test_from_file_0000\n"
        "api_base: https://api.example.test\n"
        "timeout_seconds: 12\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def _no_dotenv(tmp_path, monkeypatch):
    # load_dotenv() searches from the working directory
    monkeypatch.chdir(tmp_path)


def test_defaults():
    config = ClientConfig()

    assert config.api_key is None
    assert config.api_base == DEFAULT_API_BASE
    assert config.timeout_seconds == 80.0
    assert config.user_agent.startswith("payments-client/")


def test_load_client_config_from_yaml(config_file):
    config = load_client_config(config_file)

    assert config.api_key == "sk_test_from_file_0000"
    assert config.api_base == "https://api.example.test"
    assert config.timeout_seconds == 12.0


def test_environment_overrides_yaml(config_file, monkeypatch):
    monkeypatch.setenv("PAYMENTS_API_KEY", "sk_test_from_env_1111")
    monkeypatch.setenv("PAYMENTS_TIMEOUT_SECONDS", "3.5")

    config = load_client_config(config_file)

    assert config.api_key == "sk_test_from_env_1111"
    assert config.timeout_seconds == 3.5
    assert config.api_base == "https://api.example.test"


def test_blank_environment_values_are_ignored(config_file, monkeypatch):
    monkeypatch.setenv("PAYMENTS_API_KEY", "   ")

    assert load_client_config(config_file).api_key == "sk_test_from_file_0000"


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_client_config(tmp_path / "nope.yml")


def test_empty_config_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")

    assert load_client_config(path).api_base == DEFAULT_API_BASE


def test_invalid_timeout_is_rejected(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("timeout_seconds: 0\n", encoding="utf-8")

    with pytest.raises(ValidationError):
        load_client_config(path)


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("PAYMENTS_API_KEY", "sk_test_env")
    monkeypatch.setenv("PAYMENTS_API_VERSION", "2019-05-16")

    config = config_from_env()

    assert config.api_key == "sk_test_env"
    assert config.api_version == "2019-05-16"


def test_config_from_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("PAYMENTS_API_BASE=https://dotenv.example.test\n", encoding="utf-8")

    assert config_from_env().api_base == "https://dotenv.example.test"


def test_config_from_env_rejects_bad_timeout(monkeypatch):
    monkeypatch.setenv("PAYMENTS_TIMEOUT_SECONDS", "-1")

    with pytest.raises(ValidationError):
        config_from_env()


def test_masked_key():
    assert ClientConfig().masked_key() == "<unset>"
    assert ClientConfig(api_key="sk_test_4eC39HqLyjWDarjtT1zdp7dc").masked_key() == "sk_test...p7dc"
