import json


def test_counter_starts_at_one_and_persists(app, client):
    assert client.get("/api/visits").get_json() == {"count": 1}
    assert client.get("/api/visits").get_json() == {"count": 2}
    with open(app.config["VISITS_FILE"], encoding="utf-8") as f:
        assert json.load(f) == {"count": 2}


def test_corrupt_file_restarts_counter(app, client, tmp_path):
    path = tmp_path / "data" / "visits.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("{not json", encoding="utf-8")
    assert client.get("/api/visits").get_json() == {"count": 1}


def test_non_numeric_count_is_zero(app, client, tmp_path):
    path = tmp_path / "data" / "visits.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"count": "many"}), encoding="utf-8")
    assert client.get("/api/visits").get_json() == {"count": 1}
