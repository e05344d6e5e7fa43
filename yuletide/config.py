from __future__ import annotations

# yuletide/config.py
import os
from typing import Any

import yaml

# 配置解析顺序：环境变量 > config.yaml > 内置默认值
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_DB_PATH = os.path.join(_PROJECT_ROOT, "yuletide.db")
DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"


def config_path() -> str:
    return os.environ.get("YULETIDE_CONFIG") or os.path.join(_PROJECT_ROOT, "config.yaml")


def read_config_yaml() -> dict[str, Any]:
    """
    Load config.yaml as a dict. A missing or malformed file means no overrides.
    """
    path = config_path()
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return cfg if isinstance(cfg, dict) else {}


def _cfg_str(cfg: dict, key: str) -> str | None:
    v = cfg.get(key)
    if isinstance(v, str) and v.strip():
        return v.strip()
    return None


def is_test_env() -> bool:
    return (os.environ.get("APP_ENV") == "test") or (os.environ.get("PYTEST_CURRENT_TEST") is not None)


def get_db_path() -> str:
    env_path = os.environ.get("YULETIDE_DB_PATH")
    cfg = read_config_yaml()
    cfg_db = _cfg_str(cfg, "db_path")
    cfg_test = _cfg_str(cfg, "test_db_path")

    if env_path:
        path = env_path
    elif is_test_env() and cfg_test:
        path = cfg_test
    elif cfg_db:
        path = cfg_db
    else:
        path = DEFAULT_DB_PATH

    dirn = os.path.dirname(path) or "."
    os.makedirs(dirn, exist_ok=True)
    return path


def get_port() -> int:
    raw = os.environ.get("PORT") or read_config_yaml().get("port")
    if raw in (None, ""):
        return DEFAULT_PORT
    return int(raw)


def get_host() -> str:
    return os.environ.get("HOST") or _cfg_str(read_config_yaml(), "host") or DEFAULT_HOST


def get_cors_origins() -> list[str]:
    origins = read_config_yaml().get("cors_origins")
    if isinstance(origins, list) and origins:
        return [str(o) for o in origins]
    return ["*"]
