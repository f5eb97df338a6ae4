import random

from app.pipelines.pipeline import IdeaSelector
from app.tests.conftest import ScriptedRandom


def test_health(client_for, dummy_ideas):
    client = client_for(IdeaSelector(dummy_ideas))
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok", "ideas": 4}


def test_pick_without_filters(client_for, sf_ideas):
    client = client_for(IdeaSelector(sf_ideas, rng=random.Random(5)))
    res = client.post("/api/ideas/pick", json={})
    assert res.status_code == 200
    body = res.json()
    assert body["explain"] is None
    assert body["relaxed"] == []
    assert body["pool_size"] == 60
    assert 1 <= body["data"]["id"] <= 60


def test_pick_relaxed(client_for, sf_ideas):
    client = client_for(IdeaSelector(sf_ideas, rng=random.Random(5)))
    res = client.post(
        "/api/ideas/pick",
        json={"moods": ["chaotic"], "budgets": ["$$$"], "times": ["day"]},
    )
    body = res.json()
    assert body["relaxed"] == ["budget"]
    assert body["explain"] == "No exact matches, relaxed filters: budget."
    assert body["data"]["id"] in (40, 44, 53)


def test_pick_ada_only_reports_no_match(client_for, sf_ideas):
    client = client_for(IdeaSelector(sf_ideas))
    res = client.post("/api/ideas/pick", json={"ada_only": True})
    assert res.status_code == 200
    body = res.json()
    assert body["data"] is None
    assert body["reason"] == "no_match"
    assert body["relaxed"] == ["budget", "mood", "time", "links"]


def test_pick_empty_dataset(client_for):
    client = client_for(IdeaSelector([]))
    body = client.post("/api/ideas/pick", json={}).json()
    assert body["data"] is None
    assert body["reason"] == "empty_dataset"
    assert body["explain"] == "No ideas available (dataset empty)."


def test_pick_rejects_unknown_enum(client_for, dummy_ideas):
    client = client_for(IdeaSelector(dummy_ideas))
    res = client.post("/api/ideas/pick", json={"times": ["evening"]})
    assert res.status_code == 422


def test_pick_card_fields(client_for, dummy_ideas):
    client = client_for(IdeaSelector(dummy_ideas, rng=ScriptedRandom([0])))
    data = client.post("/api/ideas/pick", json={"links": {"websites": True}}).json()["data"]
    assert data["id"] == 2
    assert data["mood_labels"] == ["Foodie", "Chill"]
    assert data["display_links"][0] == {
        "category": "maps",
        "label": "Google Maps",
        "url": "https://maps.example/ferry-building",
    }


def test_replace_returns_different_idea(client_for, dummy_ideas):
    client = client_for(IdeaSelector(dummy_ideas, rng=ScriptedRandom([0, 0, 3])))
    res = client.post("/api/ideas/replace", json={"criteria": {}, "previous_id": 1})
    assert res.status_code == 200
    assert res.json()["data"]["id"] == 4


def test_replace_without_previous_picks_fresh(client_for, dummy_ideas):
    client = client_for(IdeaSelector(dummy_ideas, rng=ScriptedRandom([2])))
    res = client.post("/api/ideas/replace", json={})
    assert res.json()["data"]["id"] == 3


def test_replace_unknown_previous(client_for, dummy_ideas):
    client = client_for(IdeaSelector(dummy_ideas))
    res = client.post("/api/ideas/replace", json={"previous_id": 999})
    assert res.status_code == 404


def test_list_and_get_ideas(client_for, dummy_ideas):
    client = client_for(IdeaSelector(dummy_ideas))
    ideas = client.get("/api/ideas").json()
    assert [i["id"] for i in ideas] == [1, 2, 3, 4]

    idea = client.get("/api/ideas/3").json()
    assert idea["mood"] == ["playful", "chaotic"]
    assert client.get("/api/ideas/99").status_code == 404


def test_facets(client_for, dummy_ideas):
    client = client_for(IdeaSelector(dummy_ideas))
    body = client.get("/api/facets").json()
    assert body == {
        "moods": ["chaotic", "chill", "foodie", "playful", "romantic"],
        "times": ["day", "night"],
        "budgets": ["$", "$$", "$$$"],
        "links": ["maps", "yelp", "websites"],
    }


def test_replace_on_empty_dataset_reports_empty(client_for):
    client = client_for(IdeaSelector([]))
    res = client.post("/api/ideas/replace", json={"previous_id": 1})
    assert res.status_code == 200
    body = res.json()
    assert body["data"] is None
    assert body["reason"] == "empty_dataset"
    assert body["explain"] == "No ideas available (dataset empty)."


def test_pick_accepts_single_string_facets(client_for, dummy_ideas):
    client = client_for(IdeaSelector(dummy_ideas, rng=ScriptedRandom([0])))
    res = client.post("/api/ideas/pick", json={"moods": "chill", "times": "day", "budgets": "$$"})
    assert res.status_code == 200
    body = res.json()
    assert body["relaxed"] == []
    assert body["data"]["id"] == 2
