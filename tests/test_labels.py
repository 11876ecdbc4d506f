def test_label_crud(client, auth_headers):
    res = client.post("/Label", headers=auth_headers, json={"name": "python"})
    assert res.status_code == 201
    label = res.json()

    assert client.get(f"/Label/{label['id']}", headers=auth_headers).json() == label

    res = client.put(f"/Label/{label['id']}", headers=auth_headers, json={"name": "py"})
    assert res.json() == {"id": label["id"], "name": "py"}

    assert client.delete(f"/Label/{label['id']}", headers=auth_headers).status_code == 204
    assert client.get(f"/Label/{label['id']}", headers=auth_headers).status_code == 404


def test_label_names_are_globally_unique(client, auth_headers, create_user):
    _, other = create_user()
    client.post("/Label", headers=auth_headers, json={"name": "news"})
    res = client.post("/Label", headers=other, json={"name": "news"})
    assert res.status_code == 400
    assert res.json() == {"message": "Label 'news' already exists."}


def test_labels_are_shared_between_users(client, auth_headers, create_user):
    _, other = create_user()
    client.post("/Label", headers=auth_headers, json={"name": "shared"})
    names = [label["name"] for label in client.get("/Label", headers=other).json()]
    assert "shared" in names


def test_deleting_label_detaches_it_from_links(client, auth_headers):
    label = client.post("/Label", headers=auth_headers, json={"name": "temp"}).json()
    link = client.post(
        "/Link",
        headers=auth_headers,
        json={"description": "d", "url": "https://t.example", "labelIds": [label["id"]]},
    ).json()

    client.delete(f"/Label/{label['id']}", headers=auth_headers)

    assert client.get(f"/Link/{link['id']}", headers=auth_headers).json()["labelIds"] == []


def test_delete_missing_label_is_404(client, auth_headers):
    assert client.delete("/Label/4242", headers=auth_headers).status_code == 404
