from risk_register.config import AppConfig, DEFAULT_SEED_PATH, env_bool


def test_defaults():
    config = AppConfig()
    assert config.storage_slot == "risk_register_items"
    assert config.seed_path == DEFAULT_SEED_PATH
    assert config.upcoming_limit == 5
    assert config.quick_win_threshold == 5000
    assert config.jitter_source == "index"


def test_from_env(monkeypatch):
    monkeypatch.setenv("STORAGE_SLOT", "other_slot")
    monkeypatch.setenv("UPCOMING_LIMIT", "3")
    monkeypatch.setenv("JITTER_SOURCE", "id")
    config = AppConfig.from_env()
    assert config.storage_slot == "other_slot"
    assert config.upcoming_limit == 3
    assert config.as_dict()["jitter_source"] == "id"


def test_env_bool(monkeypatch):
    monkeypatch.setenv("FLAG", "Yes")
    assert env_bool("FLAG") is True
    monkeypatch.setenv("FLAG", "0")
    assert env_bool("FLAG", True) is False
    assert env_bool("UNSET_FLAG_FOR_TEST", True) is True
