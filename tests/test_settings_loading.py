"""
Test settings loading.

Every key documented in .env.example must map onto a settings field, and
environment variables must override the defaults.
"""
from __future__ import annotations

from pathlib import Path
import re

import pytest

# Import api.dependencies so dotenv loads exactly once (canonical location).
import api.dependencies  # noqa: F401

from core.settings import get_app_settings
from core.settings.modules import AuthSettings, DatabaseSettings, ServerSettings


def _parse_env_keys(env_path: Path) -> list[str]:
    text = env_path.read_text(encoding="utf-8", errors="replace")
    keys: list[str] = []
    for line in text.splitlines():
        s = line.strip()
        if not s or s.startswith("#") or "=" not in s:
            continue
        k, _ = s.split("=", 1)
        k = k.strip()
        if re.fullmatch(r"[A-Za-z_][A-Za-z0-9_]*", k) and k not in keys:
            keys.append(k)
    return keys


def _env_names(model) -> dict[str, str]:
    """
    Return map: ENV_NAME -> field_name for a settings model.
    """
    prefix = model.model_config.get("env_prefix", "")
    names: dict[str, str] = {}
    for field_name, field in type(model).model_fields.items():
        names[field.alias or f"{prefix}{field_name}".upper()] = field_name
    return names


def test_every_env_key_is_mapped():
    repo_root = Path(__file__).resolve().parents[1]
    keys = _parse_env_keys(repo_root / ".env.example")

    settings = get_app_settings()
    modules = {
        "database": settings.database,
        "auth": settings.auth,
        "google_places": settings.google_places,
        "server": settings.server,
    }

    env_to_locator: dict[str, tuple[str, str]] = {}
    for module_name, model in modules.items():
        for env_name, field_name in _env_names(model).items():
            if env_name in env_to_locator:
                pytest.fail(f"Duplicate env name mapped twice: {env_name}")
            env_to_locator[env_name] = (module_name, field_name)

    missing = [k for k in keys if k not in env_to_locator]
    assert not missing, f"Unmapped env keys: {missing}"

    for env_key in keys:
        module_name, field_name = env_to_locator[env_key]
        assert getattr(modules[module_name], field_name) is not None


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("DB_DATABASE_URL", "postgresql+asyncpg://truck:line@db:5432/truckline")
    monkeypatch.setenv("AUTH_TOKEN_EXPIRE_MINUTES", "15")
    monkeypatch.setenv("PORT", "8080")

    assert DatabaseSettings().database_url == "postgresql+asyncpg://truck:line@db:5432/truckline"
    assert AuthSettings().auth_token_expire_minutes == 15
    assert ServerSettings().port == 8080


def test_auth_defaults(monkeypatch):
    for name in ("AUTH_TOKEN_EXPIRE_MINUTES", "TOKEN_EXPIRE_MINUTES", "JWT_ALGORITHM"):
        monkeypatch.delenv(name, raising=False)

    settings = AuthSettings(_env_file=None)

    assert settings.jwt_algorithm == "HS256"
    assert settings.auth_token_expire_minutes == 30
    assert settings.token_expire_minutes == 60
