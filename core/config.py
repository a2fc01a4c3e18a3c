import os
from pathlib import Path
from dotenv import load_dotenv, set_key

APP_PATH = Path(os.getenv("SEALBOX_HOME", "~/.sealbox")).expanduser()
ENVIRONMENT = os.getenv("SEALBOX_ENVIRONMENT", "production")

# load_dotenv never overrides a value that is already set, so the most
# specific file goes first and the process environment wins over all of them
for env_file in (
    Path(f".env.{ENVIRONMENT}"),
    Path(".env"),
    APP_PATH / f".env.{ENVIRONMENT}",
    APP_PATH / ".env",
):
    load_dotenv(dotenv_path=env_file)


class Config:
    APP_PATH = APP_PATH
    ENVIRONMENT = ENVIRONMENT
    CIPHER_KEY = os.getenv("SEALBOX_CIPHER_KEY")
    TARGET_DIR = os.getenv("SEALBOX_TARGET_DIR", str(APP_PATH))
    # validated when a file is encrypted
    COMPRESSION_LEVEL = os.getenv("SEALBOX_COMPRESSION_LEVEL", "9")
    DEBUG = os.getenv("SEALBOX_DEBUG", "false").lower() in ("1", "true", "yes")


def save_setting(key: str, value: str, env_file: Path) -> Path:
    """
    Persist a setting into a dotenv file, creating the file if needed.

    Args:
        key (str): Setting name, e.g. SEALBOX_CIPHER_KEY
        value (str): Value to store
        env_file (Path): dotenv file to update

    Returns:
        Path: The dotenv file that was written
    """
    env_file = Path(env_file).expanduser()
    env_file.parent.mkdir(parents=True, exist_ok=True)
    env_file.touch(exist_ok=True)
    set_key(str(env_file), key, value)
    return env_file
