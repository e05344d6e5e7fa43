import os

from yuletide import config
from yuletide.domain.gift import fill_defaults


def test_env_db_path_wins(tmp_db_path):
    assert config.get_db_path() == tmp_db_path


def test_config_yaml_overrides(tmp_path, monkeypatch):
    cfg = tmp_path / "config.yaml"
    db = tmp_path / "nested" / "gifts.db"
    cfg.write_text(
        f"db_path: {db}\nport: 8081\nhost: 127.0.0.1\ncors_origins:\n  - http://localhost:5173\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("YULETIDE_CONFIG", str(cfg))
    monkeypatch.delenv("YULETIDE_DB_PATH", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("HOST", raising=False)

    assert config.get_db_path() == str(db)
    assert os.path.isdir(db.parent)
    assert config.get_port() == 8081
    assert config.get_host() == "127.0.0.1"
    assert config.get_cors_origins() == ["http://localhost:5173"]

    monkeypatch.setenv("PORT", "4000")
    assert config.get_port() == 4000


def test_defaults_without_config(tmp_path, monkeypatch):
    monkeypatch.setenv("YULETIDE_CONFIG", str(tmp_path / "absent.yaml"))
    monkeypatch.delenv("YULETIDE_DB_PATH", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("HOST", raising=False)
    assert config.get_port() == 3000
    assert config.get_host() == "0.0.0.0"
    assert config.get_cors_origins() == ["*"]
    assert config.get_db_path() == config.DEFAULT_DB_PATH


def test_malformed_config_is_ignored(tmp_path, monkeypatch):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("port: [unclosed\n", encoding="utf-8")
    monkeypatch.setenv("YULETIDE_CONFIG", str(cfg))
    assert config.read_config_yaml() == {}


def test_fill_defaults():
    assert fill_defaults(None) == {"kid": "", "item": "", "link": "", "helper": "", "deliveryDate": ""}
    out = fill_defaults({"kid": "Yasha", "link": None, "extra": "x"})
    assert out == {"kid": "Yasha", "item": "", "link": "", "helper": "", "deliveryDate": ""}


def test_fill_defaults_mirrors_falsy_coalescing():
    out = fill_defaults({"kid": "Ben", "item": 5, "link": 0, "helper": False, "deliveryDate": None})
    assert out == {"kid": "Ben", "item": "5", "link": "", "helper": "", "deliveryDate": ""}
    assert fill_defaults(["not", "a", "mapping"])["kid"] == ""
