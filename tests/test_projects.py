def test_create_and_list_projects(client, create_user):
    _, headers = create_user()
    res = client.post("/Project", headers=headers, json={"name": "Reading"})
    assert res.status_code == 201, res.text
    project = res.json()
    assert project["name"] == "Reading"

    listed = client.get("/Project", headers=headers).json()
    assert listed == [project]


def test_duplicate_project_name_for_same_user_fails(client, create_user):
    _, headers = create_user()
    client.post("/Project", headers=headers, json={"name": "Reading"})
    res = client.post("/Project", headers=headers, json={"name": "Reading"})
    assert res.status_code == 400
    assert res.json() == {"message": "Project 'Reading' already exists for this user."}


def test_same_project_name_for_other_user_succeeds(client, create_user):
    _, first = create_user()
    _, second = create_user()
    assert client.post("/Project", headers=first, json={"name": "Reading"}).status_code == 201
    assert client.post("/Project", headers=second, json={"name": "Reading"}).status_code == 201


def test_blank_project_name_rejected(client, create_user):
    _, headers = create_user()
    res = client.post("/Project", headers=headers, json={"name": "  "})
    assert res.status_code == 400
    assert res.json() == {"message": "Project name cannot be empty"}


def test_other_users_project_behaves_as_missing(client, create_user):
    _, owner = create_user()
    _, stranger = create_user()
    project = client.post("/Project", headers=owner, json={"name": "Private"}).json()

    assert client.get(f"/Project/{project['id']}", headers=stranger).status_code == 404
    assert client.delete(f"/Project/{project['id']}", headers=stranger).status_code == 404
    assert client.get(f"/Project/{project['id']}", headers=owner).status_code == 200


def test_rename_project(client, create_user):
    _, headers = create_user()
    project = client.post("/Project", headers=headers, json={"name": "Old"}).json()
    res = client.put(f"/Project/{project['id']}", headers=headers, json={"name": "New"})
    assert res.status_code == 200
    assert res.json()["name"] == "New"


def test_delete_missing_project_is_404(client, auth_headers):
    res = client.delete("/Project/12345", headers=auth_headers)
    assert res.status_code == 404
    assert res.json() == {"message": "Project with ID 12345 not found."}


def test_project_exists_is_owner_scoped(client, create_user):
    _, owner = create_user()
    _, stranger = create_user()
    project = client.post("/Project", headers=owner, json={"name": "Exists"}).json()

    assert client.get(f"/Project/exists/{project['id']}", headers=owner).json() is True
    assert client.get(f"/Project/exists/{project['id']}", headers=stranger).json() is False
    assert client.get("/Project/exists/999", headers=owner).json() is False


def test_check_project_name_only_sees_callers_projects(client, create_user):
    _, owner = create_user()
    _, stranger = create_user()
    client.post("/Project", headers=owner, json={"name": "Reading"})

    res = client.get("/Project/check-name/Reading", headers=owner)
    assert res.status_code == 200
    assert res.json() is True
    assert client.get("/Project/check-name/Writing", headers=owner).json() is False
    assert client.get("/Project/check-name/Reading", headers=stranger).json() is False


def test_project_exists_requires_token(client):
    assert client.get("/Project/exists/1").status_code == 401
