from tests.conftest import make_student, mark_record


def test_empty_dashboard(client):
    assert client.get("/api/dashboard/stats").get_json() == {
        "totalStudents": 0,
        "totalSubjects": 0,
        "totalMarksEntries": 0,
    }


def test_counts_follow_inserts_and_deletes(client):
    ids = [make_student(client, f"21CS{i:03d}") for i in range(5)]
    subject_ids = []
    for code in ("CS201", "CS202", "CS203"):
        resp = client.post("/api/subjects", json={
            "year": "2", "department": "CSE", "semester": "3",
            "subject_code": code, "subject_name": code,
        })
        subject_ids.append(resp.get_json()["data"]["id"])
    client.post("/api/marks/bulk", json={"marks": [
        mark_record(ids[0], 50),
        mark_record(ids[1], 60),
        mark_record(ids[1], 61, subject_code="CS202"),
    ]})

    # students without marks, so only the students table shrinks
    client.delete(f"/api/students/{ids[3]}")
    client.delete(f"/api/students/{ids[4]}")
    client.delete(f"/api/subjects/{subject_ids[0]}")

    assert client.get("/api/dashboard/stats").get_json() == {
        "totalStudents": 3,
        "totalSubjects": 2,
        "totalMarksEntries": 3,
    }
