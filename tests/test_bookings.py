def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def test_student_lists_own_bookings(client, student_headers, seed_data):
    r = client.get("/bookings", params={"email": "student1@example.com"}, headers=student_headers)
    assert r.status_code == 200
    rows = r.json()
    assert len(rows) == 1
    assert rows[0]["classId"] == seed_data["spanish_id"]
    assert rows[0]["studentEmail"] == "student1@example.com"


def test_book_and_cancel(client, student_headers, seed_data):
    r = client.post(
        "/bookings", headers=student_headers, json={"classId": seed_data["french_id"]}
    )
    assert r.status_code == 201, r.text
    booking_id = r.json()["id"]

    r = client.get(f"/bookings/{booking_id}", headers=student_headers)
    assert r.status_code == 200
    assert r.json()["classId"] == seed_data["french_id"]

    r = client.delete(f"/bookings/{booking_id}", headers=student_headers)
    assert r.status_code == 200
    assert r.json() == {"deletedCount": 1}

    r = client.get(f"/bookings/{booking_id}", headers=student_headers)
    assert r.status_code == 404


def test_booking_same_class_twice_is_409(client, student_headers, seed_data):
    r = client.post(
        "/bookings", headers=student_headers, json={"classId": seed_data["spanish_id"]}
    )
    assert r.status_code == 409


def test_booking_unknown_class_is_404(client, student_headers):
    r = client.post("/bookings", headers=student_headers, json={"classId": 99999})
    assert r.status_code == 404


def test_only_students_book(client, instructor_headers, seed_data):
    r = client.post(
        "/bookings", headers=instructor_headers, json={"classId": seed_data["french_id"]}
    )
    assert r.status_code == 403


def test_other_students_booking_is_off_limits(client, seed_data):
    token = client.post("/jwt", json={"email": "student2@example.com"}).json()["token"]
    headers = auth_header(token)
    booking_id = seed_data["booking_id"]

    assert client.get(f"/bookings/{booking_id}", headers=headers).status_code == 401
    assert client.delete(f"/bookings/{booking_id}", headers=headers).status_code == 401
