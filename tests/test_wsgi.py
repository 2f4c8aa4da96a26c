import importlib
import sys

import app as app_module


def test_importing_app_module_creates_nothing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("UPLOAD_FOLDER", raising=False)

    importlib.reload(app_module)

    assert not (tmp_path / "uploads").exists()


def test_wsgi_builds_app_from_environment(tmp_path, monkeypatch):
    upload_folder = tmp_path / "staging"
    monkeypatch.setenv("UPLOAD_FOLDER", str(upload_folder))
    monkeypatch.setenv("HF_API_KEY", "hf_test")
    monkeypatch.setattr("config.load_dotenv", lambda: False)
    monkeypatch.delitem(sys.modules, "wsgi", raising=False)

    wsgi = importlib.import_module("wsgi")

    assert upload_folder.is_dir()
    res = wsgi.app.test_client().get("/")
    assert res.status_code == 200
