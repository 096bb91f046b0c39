from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

import app.main as main_module
from app.clock import get_now
from app.config import Settings


def test_settings_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.host == "0.0.0.0"
    assert settings.list_dates_suffix == "list-dates"


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("LIST_DATES_SUFFIX", "list-distinct")
    monkeypatch.setenv("PORT", "9090")

    settings = Settings(_env_file=None)

    assert settings.list_dates_suffix == "list-distinct"
    assert settings.port == 9090


def test_settings_reject_unknown_suffix(monkeypatch) -> None:
    monkeypatch.setenv("LIST_DATES_SUFFIX", "list-all")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_app_serves_till_salary_routes() -> None:
    main_module.app.dependency_overrides[get_now] = lambda: datetime(2026, 10, 18, 10, 0)
    try:
        with TestClient(main_module.app) as client:
            how_much = client.get("/till-salary/how-much?pay_day=31")
            pay_days = client.get("/till-salary/pay-day/15/list-dates")
    finally:
        main_module.app.dependency_overrides.clear()

    assert how_much.status_code == 201
    assert how_much.json()["data"]["next_pay_day"] == "2026-10-31"
    assert pay_days.status_code == 201
    assert pay_days.json()["data"]["pay_day_dates"] == ["2026-11-15", "2026-12-15"]


def test_serve_runs_app_on_configured_port(monkeypatch) -> None:
    calls = []

    def fake_run(app, **kwargs):
        calls.append((app, kwargs))

    monkeypatch.setattr(main_module.settings, "port", 8080)
    main_module.serve(run=fake_run)

    assert calls == [(main_module.app, {"host": main_module.settings.host, "port": 8080})]


def test_serve_propagates_runner_errors() -> None:
    def failing_run(app, **kwargs):
        raise OSError("address already in use")

    with pytest.raises(OSError):
        main_module.serve(run=failing_run)
