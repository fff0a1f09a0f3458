def test_create_user_is_idempotent_by_email(client, admin_headers):
    body = {"email": "fresh@example.com", "name": "Fresh", "role": "student"}

    r1 = client.post("/users", json=body)
    assert r1.status_code == 201, r1.text
    assert r1.json()["email"] == "fresh@example.com"

    r2 = client.post("/users", json=body)
    assert r2.status_code == 200
    assert r2.json() == {"message": "user already exists"}

    users = client.get("/users", headers=admin_headers).json()
    assert [u["email"] for u in users].count("fresh@example.com") == 1


def test_new_user_has_no_role_by_default(client):
    r = client.post("/users", json={"email": "plain@example.com"})
    assert r.status_code == 201
    assert r.json()["role"] is None


def test_role_flags(client, student_headers, admin_headers):
    r = client.get("/users/role/student1@example.com", headers=student_headers)
    assert r.json() == {"isStudent": True, "isInstructor": False, "isAdmin": False}

    r = client.get("/users/role/admin@example.com", headers=admin_headers)
    assert r.json() == {"isStudent": False, "isInstructor": False, "isAdmin": True}


def test_admin_grants_instructor_then_admin(client, admin_headers, seed_data):
    user_id = seed_data["newcomer_id"]

    r = client.patch(f"/users/{user_id}/make-instructor", headers=admin_headers)
    assert r.status_code == 200, r.text
    assert r.json()["role"] == "instructor"

    r = client.patch(f"/users/{user_id}/make-admin", headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["role"] == "admin"


def test_legacy_verbs_grant_roles(client, admin_headers, seed_data):
    user_id = seed_data["newcomer_id"]

    r = client.patch(f"/users/{user_id}", headers=admin_headers)
    assert r.json()["role"] == "instructor"

    r = client.put(f"/users/{user_id}", headers=admin_headers)
    assert r.json()["role"] == "admin"


def test_only_admin_can_grant_roles(client, instructor_headers, seed_data):
    r = client.patch(
        f"/users/{seed_data['student_id']}/make-admin", headers=instructor_headers
    )
    assert r.status_code == 403


def test_role_change_applies_to_next_request(client, admin_headers, seed_data):
    token = client.post("/jwt", json={"email": "newcomer@example.com"}).json()["token"]
    newcomer = {"Authorization": f"Bearer {token}"}

    assert client.get("/users", headers=newcomer).status_code == 403
    client.put(f"/users/{seed_data['newcomer_id']}", headers=admin_headers)
    assert client.get("/users", headers=newcomer).status_code == 200


def test_grant_role_unknown_user_is_404(client, admin_headers):
    r = client.patch("/users/99999/make-instructor", headers=admin_headers)
    assert r.status_code == 404
    assert r.json() == {"error": True, "message": "User not found"}


def test_mixed_case_email_matches_its_token(client, seed_data):
    r = client.post(
        "/users", json={"email": "Mixed@Example.COM", "role": "student"}
    )
    assert r.status_code == 201, r.text
    assert r.json()["email"] == "mixed@example.com"

    token = client.post("/jwt", json={"email": "Mixed@Example.COM"}).json()["token"]
    headers = {"Authorization": f"Bearer {token}"}

    r = client.get("/payments", params={"email": "Mixed@Example.COM"}, headers=headers)
    assert r.status_code == 200, r.text
    assert r.json() == []

    r = client.post("/bookings", headers=headers, json={"classId": seed_data["french_id"]})
    assert r.status_code == 201, r.text
    assert r.json()["studentEmail"] == "mixed@example.com"

    r = client.post(
        "/payments",
        headers=headers,
        json={
            "email": "Mixed@Example.COM",
            "classId": seed_data["french_id"],
            "bookingId": r.json()["id"],
            "price": 59,
        },
    )
    assert r.status_code == 201, r.text

    r = client.post("/users", json={"email": "MIXED@example.com"})
    assert r.json() == {"message": "user already exists"}
