import json


def put(client, key, english, arabic=None, tags=None):
    body = {"english": english}
    if arabic is not None:
        body["arabic"] = arabic
    if tags is not None:
        body["tags"] = tags
    return client.put(f"/api/translation/{key}", json=body)


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


def test_empty_store(client):
    assert client.get("/api/translations").json() == {"data": []}


def test_put_then_get(client):
    response = put(client, "save", "Save", "حفظ", ["ui"])
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Translation updated successfully"

    record = client.get("/api/translation/save").json()
    assert record == {
        "key": "save",
        "english": "Save",
        "arabic": "حفظ",
        "tags": ["ui"],
        "version": body["version"],
    }


def test_put_defaults_arabic_and_tags(client):
    put(client, "save", "Save")
    record = client.get("/api/translation/save").json()
    assert record["arabic"] == ""
    assert record["tags"] == []


def test_put_requires_english(client):
    response = client.put("/api/translation/save", json={"arabic": "حفظ"})
    assert response.status_code == 422


def test_put_writes_store_file(client, store_path):
    put(client, "save", "Save", "حفظ")
    payload = json.loads(store_path.read_text(encoding="utf-8"))
    assert [item["key"] for item in payload["data"]] == ["save"]


def test_get_missing_key(client):
    response = client.get("/api/translation/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "Key not found"}


def test_delete(client):
    put(client, "save", "Save")
    response = client.delete("/api/translation/save")
    assert response.json() == {"success": True, "message": "Translation deleted successfully"}
    assert client.get("/api/translation/save").status_code == 404


def test_delete_missing_key_succeeds(client):
    response = client.delete("/api/translation/nope")
    assert response.status_code == 200
    assert response.json()["success"] is True


def test_translations_since(client):
    version = put(client, "save", "Save", tags=["ui"]).json()["version"]

    assert client.get(f"/api/translations-since/{version - 1}").json()[0]["key"] == "save"
    assert client.get(f"/api/translations-since/{version}").json() == []


def test_translations_since_tag_filter(client):
    version = put(client, "save", "Save", tags=["ui"]).json()["version"]
    put(client, "open", "Open", tags=["menu"])

    tagged = client.get(f"/api/translations-since/{version - 1}", params={"tag": "menu"}).json()
    assert [r["key"] for r in tagged] == ["open"]

    absent = client.get(f"/api/translations-since/{version - 1}", params={"tag": "none"}).json()
    assert absent == []


def test_search_english(client):
    put(client, "save", "Save", "حفظ")

    response = client.get("/api/search-english/SAVE")
    assert response.status_code == 200
    assert response.json()["key"] == "save"


def test_search_english_missing(client):
    response = client.get("/api/search-english/Cancel")
    assert response.status_code == 404
    assert response.json() == {"error": "Translation not found"}


def test_root_descriptor(client):
    body = client.get("/").json()
    assert body["docs"] == "/docs"
    assert body["endpoints"]["translations"] == "/api/translations"
    assert body["endpoints"]["upload_excel"] == "/api/upload-excel"
