import threading
import time
from dataclasses import dataclass

import pytest
import requests
from werkzeug.serving import make_server

from stub_app import create_app

pytest_plugins = ["pytester"]


def wait_for_server(url, timeout=10):
    start = time.time()
    while time.time() - start < timeout:
        try:
            r = requests.get(url, timeout=1)
            if r.status_code == 200:
                return True
        except requests.RequestException:
            pass
        time.sleep(0.1)
    raise RuntimeError(f"Stub server not reachable at {url}")


@dataclass
class StubServer:
    app: object
    base_url: str

    @property
    def petstore_url(self):
        return f"{self.base_url}/v2"

    @property
    def reqres_url(self):
        return self.base_url

    @property
    def recorded(self):
        return self.app.config["RECORDED"]

    @property
    def overrides(self):
        return self.app.config["OVERRIDES"]

    def requests_to(self, method, path):
        return [r for r in self.recorded if r["method"] == method and r["path"] == path]

    def reset(self):
        self.recorded.clear()
        self.overrides.clear()


@pytest.fixture(scope="session")
def _stub_server_session():
    app = create_app()
    server = make_server("127.0.0.1", 0, app, threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    stub = StubServer(app=app, base_url=f"http://127.0.0.1:{server.server_port}")
    wait_for_server(f"{stub.petstore_url}/pet/findByStatus?status=available")
    try:
        yield stub
    finally:
        server.shutdown()
        thread.join(timeout=5)


@pytest.fixture
def stub_server(_stub_server_session):
    """Running stub with a clean request log and no overrides."""
    _stub_server_session.reset()
    yield _stub_server_session
    _stub_server_session.reset()
