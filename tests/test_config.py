from observers.config import DEFAULT_LOG_LEVEL, load_settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.delenv("OBSERVERS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("OBSERVERS_METRICS", raising=False)
    settings = load_settings(str(tmp_path / "missing.env"))
    assert settings.log_level == DEFAULT_LOG_LEVEL
    assert settings.metrics_enabled is False


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("OBSERVERS_LOG_LEVEL", "debug")
    monkeypatch.setenv("OBSERVERS_METRICS", "yes")
    settings = load_settings(str(tmp_path / "missing.env"))
    assert settings.log_level == "DEBUG"
    assert settings.metrics_enabled is True


def test_invalid_log_level_falls_back(monkeypatch, tmp_path):
    monkeypatch.setenv("OBSERVERS_LOG_LEVEL", "loud")
    settings = load_settings(str(tmp_path / "missing.env"))
    assert settings.log_level == DEFAULT_LOG_LEVEL


def test_env_file_does_not_override_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("OBSERVERS_LOG_LEVEL", "ERROR")
    monkeypatch.delenv("OBSERVERS_METRICS", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("OBSERVERS_LOG_LEVEL=DEBUG\nOBSERVERS_METRICS=1\n")
    settings = load_settings(str(env_file))
    assert settings.log_level == "ERROR"
    assert settings.metrics_enabled is True


def test_finds_env_file_in_working_directory(monkeypatch, tmp_path):
    monkeypatch.delenv("OBSERVERS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("OBSERVERS_METRICS", raising=False)
    (tmp_path / ".env").write_text("OBSERVERS_METRICS=1\nOBSERVERS_LOG_LEVEL=warning\n")
    monkeypatch.chdir(tmp_path)
    settings = load_settings()
    assert settings.metrics_enabled is True
    assert settings.log_level == "WARNING"
