from config.settings import EtherscanSettings, Settings, StandardSettings
from constants.constants import DEFAULT_CONTRACT_ADDRESS, ETHERSCAN_DEFAULT_BASE_URL


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)  # no stray .env
    for var in ("ETHERSCAN_API_KEY", "ETHERSCAN_BASE_URL", "ETHERSCAN_CHAIN_ID", "DEFAULT_CONTRACT_ADDRESS"):
        monkeypatch.delenv(var, raising=False)

    etherscan = EtherscanSettings()

    assert etherscan.api_key is None
    assert etherscan.base_url == ETHERSCAN_DEFAULT_BASE_URL
    assert etherscan.chain_id == 1
    assert etherscan.default_contract_address == DEFAULT_CONTRACT_ADDRESS


def test_env_vars_populate_nested_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ETHERSCAN_API_KEY", "secret")
    monkeypatch.setenv("ETHERSCAN_CHAIN_ID", "11155111")
    monkeypatch.setenv("STANDARD_ABI_DIR", "/opt/abi")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.etherscan.api_key == "secret"
    assert settings.etherscan.chain_id == 11155111
    assert settings.standards.abi_dir == "/opt/abi"
    assert settings.app.log_level == "DEBUG"


def test_dotenv_file_is_read(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("STANDARD_ABI_DIR", raising=False)
    (tmp_path / ".env").write_text("STANDARD_ABI_DIR=abi\n")

    assert StandardSettings().abi_dir == "abi"
