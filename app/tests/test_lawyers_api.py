API = "/api/lawyer/"

SAUL = {
    "id": 1,
    "name": "Saul",
    "caseList": [{"id": 10, "name": "Kettleman"}, {"id": 11, "name": "Sandpiper"}],
}


def test_create_lawyer_with_case_list(client):
    response = client.post(API, json=SAUL)

    assert response.status_code == 201
    assert response.json() == SAUL


def test_case_list_defaults_to_empty(client):
    response = client.post(API, json={"id": 2, "name": "Kim"})

    assert response.json() == {"id": 2, "name": "Kim", "caseList": []}


def test_update_replaces_case_list(client):
    client.post(API, json=SAUL)

    response = client.put(
        f"{API}1",
        json={"id": 1, "name": "Jimmy", "caseList": [{"id": 12, "name": "Mesa Verde"}]},
    )

    assert response.status_code == 200
    stored = client.get(f"{API}1").json()
    assert stored["name"] == "Jimmy"
    assert stored["caseList"] == [{"id": 12, "name": "Mesa Verde"}]


def test_lawyer_cases_do_not_touch_case_store(client):
    client.post(API, json=SAUL)

    assert client.get("/api/lawcase/").json() == []
    client.post("/api/lawcase/", json={"id": 10, "name": "Renamed"})
    assert client.get(f"{API}1").json()["caseList"][0]["name"] == "Kettleman"


def test_delete_lawyer(client):
    client.post(API, json=SAUL)
    client.post(API, json={"id": 2, "name": "Kim"})

    response = client.delete(f"{API}2")

    assert response.text == "Lawyer with id: 2 and with name: Kim was deleted!"
    assert [lawyer["id"] for lawyer in client.get(API).json()] == [1]

    assert client.delete(API).text == "Database is empty!"
    assert client.get(API).json() == []


def test_get_missing_lawyer(client):
    response = client.get(f"{API}42")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
