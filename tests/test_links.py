import pytest


@pytest.fixture()
def labels(client, auth_headers):
    """Three global labels; returns their ids in creation order."""
    return [
        client.post("/Label", headers=auth_headers, json={"name": name}).json()["id"]
        for name in ("alpha", "beta", "gamma")
    ]


def _create_link(client, headers, url, description="desc", **extra):
    payload = {"description": description, "url": url, **extra}
    res = client.post("/Link", headers=headers, json=payload)
    assert res.status_code == 201, res.text
    return res.json()


def test_create_link_returns_201_with_owner_and_labels(client, create_user, labels):
    user, headers = create_user()
    link = _create_link(client, headers, "https://python.org", labelIds=labels[:2])

    assert link["id"] > 0
    assert link["userId"] == user["id"]
    assert link["labelIds"] == labels[:2]
    assert link["favorite"] is False
    assert link["read"] is False


def test_label_set_is_replaced_on_update(client, create_user, labels):
    _, headers = create_user()
    one, two, three = labels
    link = _create_link(client, headers, "https://replace.example", labelIds=[one, two])

    res = client.put(
        f"/Link/{link['id']}",
        headers=headers,
        json={"description": "desc", "url": "https://replace.example", "labelIds": [two, three]},
    )
    assert res.status_code == 200, res.text

    stored = client.get(f"/Link/{link['id']}", headers=headers).json()
    assert set(stored["labelIds"]) == {two, three}


def test_empty_label_list_clears_labels(client, create_user, labels):
    _, headers = create_user()
    link = _create_link(client, headers, "https://clear.example", labelIds=labels)
    client.put(
        f"/Link/{link['id']}",
        headers=headers,
        json={"description": "desc", "url": "https://clear.example", "labelIds": []},
    )
    assert client.get(f"/Link/{link['id']}", headers=headers).json()["labelIds"] == []


def test_unknown_label_is_rejected_and_nothing_saved(client, create_user):
    _, headers = create_user()
    res = client.post(
        "/Link", headers=headers, json={"description": "d", "url": "https://x.example", "labelIds": [999]}
    )
    assert res.status_code == 400
    assert res.json() == {"message": "Label with ID 999 not found."}
    assert client.get("/Link", headers=headers).json() == []


def test_two_users_may_share_a_url(client, create_user):
    _, first = create_user()
    _, second = create_user()
    _create_link(client, first, "https://shared.example")
    _create_link(client, second, "https://shared.example")


def test_same_user_cannot_save_url_twice(client, create_user):
    _, headers = create_user()
    _create_link(client, headers, "https://once.example")
    res = client.post("/Link", headers=headers, json={"description": "d", "url": "https://once.example"})
    assert res.status_code == 400
    assert res.json() == {"message": "Link with URL 'https://once.example' already exists."}


def test_links_are_owner_scoped(client, create_user):
    _, owner = create_user()
    _, stranger = create_user()
    link = _create_link(client, owner, "https://mine.example")

    assert client.get("/Link", headers=stranger).json() == []
    assert client.get(f"/Link/{link['id']}", headers=stranger).status_code == 404
    assert client.get(f"/Link/exists/{link['id']}", headers=stranger).json() is False
    assert client.get(f"/Link/exists/{link['id']}", headers=owner).json() is True


def test_toggle_favorite(client, create_user):
    _, headers = create_user()
    link = _create_link(client, headers, "https://fav.example")

    res = client.patch(f"/Link/{link['id']}/favorite", headers=headers, json=True)
    assert res.status_code == 204
    assert client.get(f"/Link/{link['id']}", headers=headers).json()["favorite"] is True

    client.patch(f"/Link/{link['id']}/favorite", headers=headers, json=False)
    assert client.get(f"/Link/{link['id']}", headers=headers).json()["favorite"] is False


def test_toggle_favorite_on_other_users_link_is_404_and_unchanged(client, create_user):
    _, owner = create_user()
    _, stranger = create_user()
    link = _create_link(client, owner, "https://notyours.example")

    res = client.patch(f"/Link/{link['id']}/favorite", headers=stranger, json=True)
    assert res.status_code == 404
    assert client.get(f"/Link/{link['id']}", headers=owner).json()["favorite"] is False


def test_delete_link(client, create_user):
    _, headers = create_user()
    link = _create_link(client, headers, "https://gone.example")
    assert client.delete(f"/Link/{link['id']}", headers=headers).status_code == 204
    res = client.delete(f"/Link/{link['id']}", headers=headers)
    assert res.status_code == 404
    assert res.json() == {"message": f"Link with ID {link['id']} not found."}


def test_update_missing_link_is_404(client, create_user):
    _, headers = create_user()
    res = client.put("/Link/777", headers=headers, json={"description": "d", "url": "https://n.example"})
    assert res.status_code == 404


class TestSearch:
    @pytest.fixture()
    def setup_links(self, client, create_user, labels):
        _, headers = create_user()
        alpha, beta, _ = labels
        python = _create_link(
            client, headers, "https://python.org", "Python Docs", labelIds=[alpha], favorite=True
        )
        rust = _create_link(client, headers, "https://rust-lang.org", "Rust book", labelIds=[beta])
        misc = _create_link(client, headers, "https://misc.example", "Misc python notes")
        return headers, labels, {"python": python, "rust": rust, "misc": misc}

    def _search(self, client, headers, **body):
        res = client.post("/Link/search", headers=headers, json=body)
        assert res.status_code == 200, res.text
        return {link["url"] for link in res.json()}

    def test_description_is_case_insensitive_substring(self, client, setup_links):
        headers, _, links = setup_links
        found = self._search(client, headers, description="PYTHON")
        assert found == {links["python"]["url"], links["misc"]["url"]}

    def test_blank_description_means_no_constraint(self, client, setup_links):
        headers, _, links = setup_links
        assert len(self._search(client, headers, description="  ")) == 3

    def test_label_filter_is_any_of(self, client, setup_links):
        headers, (alpha, beta, gamma), links = setup_links
        found = self._search(client, headers, labelIds=[alpha, beta, gamma])
        assert found == {links["python"]["url"], links["rust"]["url"]}

    @pytest.mark.parametrize("favorite, expected", [(0, 3), (1, 1), (2, 2)])
    def test_favorite_filter(self, client, setup_links, favorite, expected):
        headers, _, _ = setup_links
        assert len(self._search(client, headers, favorite=favorite)) == expected

    def test_filters_combine(self, client, setup_links):
        headers, _, links = setup_links
        found = self._search(client, headers, description="python", favorite=2)
        assert found == {links["misc"]["url"]}

    def test_search_never_returns_other_users_links(self, client, setup_links, auth_headers):
        assert self._search(client, auth_headers, description="python") == set()

    def test_wildcard_characters_match_literally(self, client, create_user):
        _, headers = create_user()
        _create_link(client, headers, "https://coverage.example", "100% coverage")
        _create_link(client, headers, "https://notes.example", "plain notes")
        _create_link(client, headers, "https://snake.example", "snake_case guide")

        assert self._search(client, headers, description="%") == {"https://coverage.example"}
        assert self._search(client, headers, description="_") == {"https://snake.example"}
