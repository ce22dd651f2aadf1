def test_health_check(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "healthy"
    assert payload["database"] == "connected"


def test_contact_page_loads(client):
    response = client.get("/contact")
    assert response.status_code == 200
    assert "Get in Touch" in response.text


def test_unknown_path_is_404(client):
    assert client.get("/nope").status_code == 404
