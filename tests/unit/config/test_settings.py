from config.settings import Settings


def test_settings_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("PROVIDER_URI", "NETWORK", "TOKEN_DECIMALS", "PRIVATE_KEY", "GOVERNANCE_ADDRESS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.ethereum.provider_uri == "http://127.0.0.1:8545"
    assert settings.ethereum.network == "localhost"
    assert settings.governance.governance_contract_name == "FractalGovernance"
    assert settings.governance.token_contract_name == "SBXToken"
    assert settings.governance.token_decimals is None
    assert settings.signer.private_key is None


def test_settings_from_flat_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PROVIDER_URI", "https://sepolia.example.org")
    monkeypatch.setenv("NETWORK", "sepolia")
    monkeypatch.setenv("TOKEN_DECIMALS", "6")
    monkeypatch.setenv("GOVERNANCE_ADDRESS", "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512")
    monkeypatch.setenv("PRIVATE_KEY", "0xsecret")

    settings = Settings()

    assert settings.ethereum.provider_uri == "https://sepolia.example.org"
    assert settings.ethereum.network == "sepolia"
    assert settings.governance.token_decimals == 6
    assert settings.governance.governance_address == "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512"
    assert settings.signer.private_key.get_secret_value() == "0xsecret"
    assert "0xsecret" not in repr(settings)


def test_settings_from_env_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RECEIPT_TIMEOUT_SECONDS", raising=False)
    (tmp_path / ".env").write_text("RECEIPT_TIMEOUT_SECONDS=30\n", encoding="utf-8")

    assert Settings().governance.receipt_timeout_seconds == 30


def test_app_settings_only_carry_log_level(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert set(type(settings.app).model_fields) == {"log_level"}
    assert settings.app.log_level == "debug"
