import pytest


def create_user(client, name="Ada", email="ada@example.com"):
    response = client.post("/users", json={"name": name, "email": email})
    assert response.status_code == 201
    return response.json()


def test_list_users_empty(client):
    response = client.get("/users")

    assert response.status_code == 200
    assert response.json() == []


def test_create_user(client):
    response = client.post("/users", json={"name": "Ada", "email": "ada@example.com"})

    assert response.status_code == 201
    assert response.json() == {"id": 1, "name": "Ada", "email": "ada@example.com"}


@pytest.mark.parametrize(
    "body, message",
    [
        ({"name": "   ", "email": "a@b.com"}, "Name is required"),
        ({"name": "Ada", "email": ""}, "Email is required"),
        ({"name": "", "email": " "}, "Name is required"),
    ],
)
def test_create_user_blank_fields(client, body, message):
    response = client.post("/users", json=body)

    assert response.status_code == 400
    assert response.json() == {"message": message}


def test_create_user_missing_email(client):
    response = client.post("/users", json={"name": "Ada"})

    assert response.status_code == 500
    assert response.json()["message"].startswith("Failed to parse request body")


def test_email_is_not_format_checked(client):
    response = client.post("/users", json={"name": "Ada", "email": "not-an-email"})

    assert response.status_code == 201


def test_get_user(client):
    created = create_user(client)

    response = client.get(f"/users/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_user_not_found(client):
    response = client.get("/users/3")

    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_get_user_invalid_id(client):
    response = client.get("/users/x1")

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid ID"}


def test_update_user_partial(client):
    created = create_user(client)

    response = client.put(f"/users/{created['id']}", json={"email": "ada@lovelace.dev"})

    assert response.status_code == 200
    assert response.json() == {
        "id": created["id"],
        "name": "Ada",
        "email": "ada@lovelace.dev",
    }


def test_update_user_null_field_is_ignored(client):
    created = create_user(client)

    response = client.put(f"/users/{created['id']}", json={"name": None})

    assert response.status_code == 200
    assert response.json() == created


def test_update_user_not_found(client):
    response = client.put("/users/8", json={"name": "x"})

    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_delete_user(client):
    created = create_user(client)

    response = client.delete(f"/users/{created['id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.delete(f"/users/{created['id']}").status_code == 404


def test_users_and_tasks_have_separate_ids(client):
    client.post("/tasks", json={"title": "a"})
    client.post("/tasks", json={"title": "b"})

    assert create_user(client)["id"] == 1


def test_user_lifecycle_on_sql_backend(sql_client):
    created = sql_client.post("/users", json={"name": "Ada", "email": "a@b.com"}).json()
    assert created == {"id": 1, "name": "Ada", "email": "a@b.com"}

    response = sql_client.put("/users/1", json={"name": "Grace"})
    assert response.json() == {"id": 1, "name": "Grace", "email": "a@b.com"}

    assert sql_client.get("/users").json() == [response.json()]
    assert sql_client.delete("/users/1").status_code == 204
    assert sql_client.get("/users/1").status_code == 404


def test_update_user_rejects_non_string_email(client):
    created = create_user(client)

    response = client.put(f"/users/{created['id']}", json={"email": 42})

    assert response.status_code == 500
    assert client.get(f"/users/{created['id']}").json() == created
