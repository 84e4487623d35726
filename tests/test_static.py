from fastapi.testclient import TestClient

from gateway.main import create_app


def test_unmatched_path_returns_shell(client):
    resp = client.get("/spots/p1/detail")
    assert resp.status_code == 200
    assert "shell" in resp.text
    assert resp.headers["content-type"].startswith("text/html")


def test_root_returns_shell(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "shell" in resp.text


def test_existing_static_file_is_served(client, public_dir):
    (public_dir / "css").mkdir()
    (public_dir / "css" / "app.css").write_text("body{}", encoding="utf-8")

    resp = client.get("/css/app.css")
    assert resp.status_code == 200
    assert resp.text == "body{}"


def test_path_outside_public_dir_falls_back(client, public_dir):
    (public_dir.parent / "secret.txt").write_text("secret", encoding="utf-8")
    resp = client.get("/..%2Fsecret.txt")
    assert resp.status_code == 200
    assert "secret" not in resp.text


def test_api_routes_take_priority(client):
    assert client.get("/api/regions").json() == [{"id": "r1"}]


def test_missing_shell_page_is_404(settings, log_store, tmp_path):
    settings.public_dir = str(tmp_path / "empty")
    app = create_app(settings, log_store=log_store)
    with TestClient(app) as c:
        assert c.get("/anything").status_code == 404


def test_directory_serves_its_index(client, public_dir):
    (public_dir / "guide").mkdir()
    (public_dir / "guide" / "index.html").write_text("<p>guide</p>", encoding="utf-8")

    resp = client.get("/guide/")
    assert resp.status_code == 200
    assert resp.text == "<p>guide</p>"


def test_directory_without_index_falls_back_to_shell(client, public_dir):
    (public_dir / "img").mkdir()
    resp = client.get("/img/")
    assert resp.status_code == 200
    assert "shell" in resp.text
