import uuid
import pytest
from dotenv import load_dotenv
from pathlib import Path

from core.config import Config

@pytest.fixture(autouse=True, scope="session")
def load_test_env():
    """
    Automatically load environment variables from `.env.test` for all test sessions.
    """
    env_path = Path(".env.test")
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=True)
        print("📦 Test environment loaded from .env.test")
    else:
        print("⚠️  No .env.test file found. Using default environment.")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """
    Point the app directory at a temporary folder and clear any configured key,
    so tests never touch the user's ~/.sealbox.
    """
    app_path = tmp_path / "sealbox-home"
    monkeypatch.setattr(Config, "APP_PATH", app_path)
    monkeypatch.setattr(Config, "TARGET_DIR", str(app_path))
    monkeypatch.setattr(Config, "CIPHER_KEY", None)
    monkeypatch.setattr(Config, "COMPRESSION_LEVEL", 9)
    return app_path


@pytest.fixture
def cipher_key():
    return uuid.UUID("6f1c2a9e-3b4d-4e5f-8a7b-0c1d2e3f4a5b")
