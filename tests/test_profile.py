from conftest import login


def test_get_profile(client, create_user):
    user, headers = create_user(name="Profile Owner")
    res = client.get("/Profile", headers=headers)
    assert res.status_code == 200
    assert res.json() == user


def test_update_profile_ignores_body_id(client, create_user):
    user, headers = create_user()
    res = client.put(
        "/Profile", headers=headers, json={"id": 1, "name": "New Name", "username": "renamed-self"}
    )
    assert res.status_code == 200, res.text
    assert res.json() == {"id": user["id"], "name": "New Name", "username": "renamed-self"}

    me = client.get("/User/me", headers=headers).json()
    assert me["id"] == user["id"]


def test_update_profile_rejects_taken_username(client, create_user):
    _, headers = create_user()
    res = client.put("/Profile", headers=headers, json={"name": "X", "username": "admin"})
    assert res.status_code == 400
    assert res.json() == {"message": "Username 'admin' already exists."}


def test_change_password(client, create_user):
    user, headers = create_user()
    res = client.put("/Profile/Password", headers=headers, json={"newPassword": "s3cret!"})
    assert res.status_code == 204

    assert login(client, user["username"], "s3cret!").status_code == 200
    assert login(client, user["username"], "123456").status_code == 401


def test_blank_password_rejected(client, create_user):
    _, headers = create_user()
    res = client.put("/Profile/Password", headers=headers, json={"newPassword": "   "})
    assert res.status_code == 400
    assert res.json() == {"message": "Password cannot be empty"}
