import base64

from fastapi.testclient import TestClient
from csvdoc.main import app

client = TestClient(app)


def _b64(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_formats():
    r = client.get("/formats")
    assert r.status_code == 200
    assert r.json() == {
        "formats": [
            {"name": "markdown", "extension": "md"},
            {"name": "yaml", "extension": "yaml"},
            {"name": "xml", "extension": "xml"},
        ]
    }


def test_convert_partial_success():
    payload = {
        "files": [
            {"filename": "people.csv", "base64Content": _b64(b"name,age\nAlice,30\n")},
            {"filename": "empty.csv", "base64Content": ""},
        ],
        "outputFormat": "markdown",
    }
    r = client.post("/convert", json=payload)
    assert r.status_code == 200
    assert r.json() == [
        {"filename": "people.md", "fileContent": "- name: Alice\n- age: 30\n---"}
    ]


def test_convert_reports_batch_error():
    payload = {
        "files": [{"filename": "broken.csv", "base64Content": _b64(b"a,b\n\x81")}],
        "outputFormat": "xml",
    }
    r = client.post("/convert", json=payload)
    assert r.status_code == 422
    assert r.json()["error"].startswith("broken.csv: ")


def test_convert_without_files():
    r = client.post("/convert", json={"files": [], "outputFormat": "yaml"})
    assert r.status_code == 422
    assert "error" in r.json()


def test_convert_without_format():
    payload = {"files": [{"filename": "a.csv", "base64Content": _b64(b"a\n1\n")}]}
    r = client.post("/convert", json=payload)
    assert r.status_code == 422
    assert "error" in r.json()


def test_upload_shift_jis_tsv():
    raw = "名前\t都市\n太郎\t東京\n".encode("cp932")
    files = [("files", ("cities.tsv", raw, "text/tab-separated-values"))]
    r = client.post("/convert/upload", params={"output_format": "xml"}, files=files)
    assert r.status_code == 200

    data = r.json()
    assert data[0]["filename"] == "cities.xml"
    assert "<item>" in data[0]["fileContent"]
    # non-ASCII names sanitize to synthesized element names
    assert "<column_1>太郎</column_1>" in data[0]["fileContent"]


def test_invalid_body_reports_error_descriptor():
    payload = {"files": [{"filename": "a.csv", "base64Content": _b64(b"a\n1\n")}], "outputFormat": 123}
    r = client.post("/convert", json=payload)
    assert r.status_code == 422

    data = r.json()
    assert list(data) == ["error"]
    assert "outputFormat" in data["error"]
