"""
HTTP surface: routes, status codes and error bodies
"""

TEACHER = {"firstName": "Ada", "lastName": "Lovelace", "email": "ada@school.test", "department": "Mathematics"}
STUDENT = {"firstName": "Alan", "lastName": "Turing", "grade": 11, "studentNumber": "S-1001"}


def _course(teacher_id, **overrides):
    body = {"code": "MTH101", "name": "Algebra", "teacherId": teacher_id, "semester": "Fall", "room": "B12"}
    body.update(overrides)
    return body


def _test(student_id, course_id, mark, out_of):
    return {
        "studentId": student_id,
        "courseId": course_id,
        "testName": "Quiz",
        "date": "2024-10-01",
        "mark": mark,
        "outOf": out_of,
    }


def _seed(client):
    teacher = client.post("/teachers", json=TEACHER).json()
    course = client.post("/courses", json=_course(teacher["id"])).json()
    student = client.post("/students", json=STUDENT).json()
    return teacher, course, student


def test_create_and_get_teacher(client):
    res = client.post("/teachers", json=TEACHER)

    assert res.status_code == 201
    teacher = res.json()
    assert teacher == {"id": teacher["id"], **TEACHER, "room": None}

    res = client.get(f"/teachers/{teacher['id']}")
    assert res.status_code == 200
    assert res.json() == teacher

    assert client.get("/teachers").json() == [teacher]


def test_routes_are_served_under_api_prefix(client):
    res = client.post("/api/v1/students", json=STUDENT)

    assert res.status_code == 201
    assert client.get("/api/v1/students").json() == [res.json()]


def test_missing_fields_are_a_bad_request(client):
    res = client.post("/teachers", json={"firstName": "Ada"})

    assert res.status_code == 400
    assert res.json() == {"error": "Missing required fields: lastName, email, department"}


def test_blank_required_field_is_a_bad_request(client):
    res = client.post("/teachers", json={**TEACHER, "email": "   "})

    assert res.status_code == 400
    assert res.json()["error"].startswith("Invalid email")


def test_unknown_and_malformed_ids_are_not_found(client):
    for path in ("/teachers/99", "/teachers/abc", "/courses/-1", "/tests/1.5"):
        res = client.get(path)
        assert res.status_code == 404, path

    assert client.get("/teachers/abc").json() == {"error": "Teacher not found"}
    assert client.put("/students/xyz", json={"grade": 9}).status_code == 404
    assert client.delete("/courses/nope").status_code == 404


def test_empty_update_is_rejected(client):
    teacher = client.post("/teachers", json=TEACHER).json()

    res = client.put(f"/teachers/{teacher['id']}", json={})

    assert res.status_code == 400
    assert res.json() == {"error": "No fields provided for update"}


def test_partial_update_returns_full_record(client):
    teacher = client.post("/teachers", json=TEACHER).json()

    res = client.put(f"/teachers/{teacher['id']}", json={"room": "C3"})

    assert res.status_code == 200
    assert res.json() == {**teacher, "room": "C3"}


def test_course_with_unknown_teacher_is_rejected(client):
    res = client.post("/courses", json=_course(teacher_id=42))

    assert res.status_code == 400
    assert res.json() == {"error": "Invalid teacherId: teacher not found"}
    assert client.get("/courses").json() == []


def test_delete_teacher_blocked_until_course_removed(client):
    teacher, course, _ = _seed(client)

    res = client.delete(f"/teachers/{teacher['id']}")
    assert res.status_code == 400
    assert res.json() == {"error": "Cannot delete teacher assigned to a course"}

    assert client.delete(f"/courses/{course['id']}").status_code == 200
    res = client.delete(f"/teachers/{teacher['id']}")
    assert res.status_code == 200
    assert res.json() == teacher


def test_test_with_zero_out_of_is_rejected(client):
    _, course, student = _seed(client)

    res = client.post("/tests", json=_test(student["id"], course["id"], mark=5, out_of=0))

    assert res.status_code == 400
    assert "outOf" in res.json()["error"]


def test_student_tests_and_average(client):
    _, course, student = _seed(client)
    client.post("/tests", json=_test(student["id"], course["id"], mark=8, out_of=10))
    client.post("/tests", json=_test(student["id"], course["id"], mark=18, out_of=20))

    tests = client.get(f"/students/{student['id']}/tests").json()
    assert [(t["mark"], t["outOf"]) for t in tests] == [(8, 10), (18, 20)]

    res = client.get(f"/students/{student['id']}/average")
    assert res.status_code == 200
    assert res.json() == {"studentId": student["id"], "testCount": 2, "average": 85.0}

    res = client.get(f"/courses/{course['id']}/average")
    assert res.json() == {"courseId": course["id"], "testCount": 2, "average": 85.0}


def test_average_without_tests_is_not_found(client):
    _, _, student = _seed(client)

    res = client.get(f"/students/{student['id']}/average")

    assert res.status_code == 404
    assert "error" in res.json()


def test_teacher_summary(client):
    teacher, algebra, student = _seed(client)
    geometry = client.post("/courses", json=_course(teacher["id"], code="MTH102", name="Geometry")).json()
    for _ in range(3):
        client.post("/tests", json=_test(student["id"], algebra["id"], mark=7, out_of=10))

    res = client.get(f"/teachers/{teacher['id']}/summary")

    assert res.status_code == 200
    assert res.json() == {
        "teacherId": teacher["id"],
        "teacherName": "Ada Lovelace",
        "courses": [
            {"courseId": algebra["id"], "courseName": "Algebra", "testCount": 3},
            {"courseId": geometry["id"], "courseName": "Geometry", "testCount": 0},
        ],
    }


def test_health_reports_storage_backend(client):
    res = client.get("/health")

    assert res.status_code == 200
    assert res.json() == {"status": "ok", "storage": "memory"}


def test_malformed_json_body_is_a_bad_request(client):
    res = client.post("/teachers", content=b"{not json", headers={"Content-Type": "application/json"})

    assert res.status_code == 400
    assert res.json() == {"error": "Invalid JSON body"}
