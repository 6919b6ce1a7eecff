import pytest
from fastapi.testclient import TestClient

from conftest import make_response, text_part
from main import create_app
from pipeline import TransformationController


@pytest.fixture
def client(controller):
    return TestClient(create_app(controller))


def upload(client, content, filename="red.png", content_type="image/png"):
    return client.post("/upload", files={"file": (filename, content, content_type)})


def test_health(client):
    assert client.get("/health").json() == {"ok": True}


def test_index_serves_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert 'accept="image/*"' in response.text


def test_initial_state(client):
    assert client.get("/state").json() == {
        "input": None,
        "output": None,
        "loading": False,
        "error": None,
    }


def test_upload_sets_input(client, red_png, red_asset):
    response = upload(client, red_png)

    assert response.status_code == 200
    body = response.json()
    assert body["input"] == red_asset.to_data_uri()
    assert body["output"] is None
    assert body["error"] is None


def test_upload_rejects_non_images(client, controller):
    response = upload(client, b"hello", filename="notes.txt", content_type="text/plain")

    assert response.status_code == 415
    assert controller.state.input is None


def test_transform_without_upload_is_noop(client, fake_model):
    response = client.post("/transform")

    assert response.status_code == 200
    assert response.json()["output"] is None
    assert fake_model.calls == []


def test_upload_then_transform(client, red_png):
    upload(client, red_png)

    body = client.post("/transform").json()

    assert body["output"] == "data:image/png;base64,AAAA"
    assert body["error"] is None
    assert body["loading"] is False


def test_text_only_response_reports_error(client, fake_model, red_png):
    fake_model.response = make_response(text_part("no image here"))
    upload(client, red_png)

    response = client.post("/transform")

    assert response.status_code == 200
    body = response.json()
    assert body["error"] == "The model did not return a transformed image. Please try again."
    assert body["output"] is None


def test_new_upload_clears_previous_output(client, red_png):
    upload(client, red_png)
    client.post("/transform")

    body = upload(client, red_png).json()

    assert body["output"] is None
    assert body["error"] is None


def test_transform_rejected_while_loading(client, controller, fake_model, red_png):
    upload(client, red_png)
    controller.state.loading = True

    response = client.post("/transform")

    assert response.status_code == 409
    assert fake_model.calls == []


def test_default_app_builds_its_own_controller():
    app = create_app()

    assert isinstance(app.state.controller, TransformationController)
