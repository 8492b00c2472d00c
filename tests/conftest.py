# tests/conftest.py
import sys, pathlib
import pytest

# Add ./src to sys.path so `import mancala_engine...` works in tests
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC  = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

@pytest.fixture(scope="session")
def app(tmp_path_factory):
    from mancala_engine.api.app import create_app
    profiles = tmp_path_factory.mktemp("profiles") / "profiles.json"
    app = create_app({"TESTING": True, "PROFILES_PATH": str(profiles), "DEFAULT_MODE": "avalanche"})
    return app

@pytest.fixture(scope="session")
def client(app):
    return app.test_client()

@pytest.fixture
def empty_board():
    return [0] * 14
