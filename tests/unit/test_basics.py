import csv
from pathlib import Path

import pytest

from customer_demo import config
from scripts import generate_data


def test_get_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    for var in ("APP_ENV", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(var, raising=False)
    config.get_settings.cache_clear()
    try:
        settings = config.get_settings()
        assert settings.app_env == "development"
        assert settings.log_level == "INFO"
        assert settings.log_json is False
    finally:
        config.get_settings.cache_clear()


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("APP_ENV", "staging")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_JSON", "true")
    settings = config.Settings()
    assert settings.app_env == "staging"
    assert settings.log_level == "DEBUG"
    assert settings.log_json is True


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()


def test_generate_data_writes_csv(tmp_path: Path):
    csv_path = tmp_path / "customers.csv"
    written = generate_data._write_customers_csv(
        csv_path, generate_data._build_dataset(rows=5, seed=123)
    )
    assert written == 5
    assert csv_path.exists()
    with csv_path.open("r", newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    # header + 5 rows = 6 lines
    assert len(rows) == 6
    assert rows[0] == ["id", "first_name", "last_name", "email", "phone", "birth_date"]
    assert [row[0] for row in rows[1:]] == ["0", "1", "2", "3", "4"]
    first = rows[1]
    assert first[3] == f"{first[1].lower()}@{first[2].lower()}.com"


def test_generate_data_is_deterministic(tmp_path: Path):
    first = tmp_path / "a.csv"
    second = tmp_path / "b.csv"
    generate_data._write_customers_csv(first, generate_data._build_dataset(rows=20, seed=0))
    generate_data._write_customers_csv(second, generate_data._build_dataset(rows=20, seed=0))
    assert first.read_bytes() == second.read_bytes()
