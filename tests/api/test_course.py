import uuid

import pytest

COURSE = {
    "courseCode": "CS101",
    "name": "Programming Basics",
    "creditHours": 4,
    "teacher": "Mr. Zhao",
    "description": "Syntax and problem solving in C",
}


@pytest.mark.asyncio
class TestCourseEndpoints:

    async def test_create_get_and_list(self, client, auth_headers):
        response = await client.post("/api/courses", json={**COURSE, "courseCode": " CS101 "}, headers=auth_headers)
        assert response.status_code == 201
        course = response.json()["course"]
        assert course["courseCode"] == "CS101"
        assert course["creditHours"] == 4

        fetched = await client.get(f"/api/courses/{course['id']}", headers=auth_headers)
        assert fetched.json() == {"course": course}

        listed = await client.get("/api/courses", headers=auth_headers)
        assert listed.json() == {"courses": [course]}

    async def test_duplicate_course_code(self, client, auth_headers):
        await client.post("/api/courses", json=COURSE, headers=auth_headers)

        response = await client.post("/api/courses", json=COURSE, headers=auth_headers)

        assert response.status_code == 409
        assert response.json() == {"error": "Course code already exists."}

    async def test_required_fields(self, client, auth_headers):
        response = await client.post("/api/courses", json={"name": "No code"}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Course code and name are required."}

    @pytest.mark.parametrize("credit_hours", [-1, 21, "30"])
    async def test_credit_hours_out_of_range(self, client, auth_headers, credit_hours):
        response = await client.post("/api/courses", json={**COURSE, "creditHours": credit_hours}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Credit hours must be between 0 and 20."}

    async def test_credit_hours_not_a_number(self, client, auth_headers):
        response = await client.post("/api/courses", json={**COURSE, "creditHours": "four"}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Credit hours must be a valid number."}

    async def test_update_credit_hours_and_clear_teacher(self, client, auth_headers):
        course = (await client.post("/api/courses", json=COURSE, headers=auth_headers)).json()["course"]

        response = await client.put(
            f"/api/courses/{course['id']}",
            json={"creditHours": "3", "teacher": ""},
            headers=auth_headers,
        )

        assert response.status_code == 200
        updated = response.json()["course"]
        assert updated["creditHours"] == 3
        assert updated["teacher"] is None
        assert updated["description"] == COURSE["description"]

    async def test_update_credit_hours_out_of_range(self, client, auth_headers):
        course = (await client.post("/api/courses", json=COURSE, headers=auth_headers)).json()["course"]

        response = await client.put(f"/api/courses/{course['id']}", json={"creditHours": 25}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Credit hours must be between 0 and 20."}

    async def test_search_by_code_or_name(self, client, auth_headers):
        await client.post("/api/courses", json=COURSE, headers=auth_headers)
        await client.post("/api/courses", json={**COURSE, "courseCode": "CS205", "name": "Data Structures"}, headers=auth_headers)

        by_code = await client.get("/api/courses", params={"search": "cs2"}, headers=auth_headers)
        by_name = await client.get("/api/courses", params={"search": "basics"}, headers=auth_headers)
        by_teacher = await client.get("/api/courses", params={"search": "zhao"}, headers=auth_headers)

        assert [c["courseCode"] for c in by_code.json()["courses"]] == ["CS205"]
        assert [c["courseCode"] for c in by_name.json()["courses"]] == ["CS101"]
        assert by_teacher.json()["courses"] == []

    async def test_delete(self, client, auth_headers):
        course = (await client.post("/api/courses", json=COURSE, headers=auth_headers)).json()["course"]

        response = await client.delete(f"/api/courses/{course['id']}", headers=auth_headers)
        again = await client.delete(f"/api/courses/{course['id']}", headers=auth_headers)

        assert response.json() == {"success": True}
        assert again.status_code == 404
        assert again.json() == {"error": "Course not found."}

    async def test_unknown_id(self, client, auth_headers):
        missing = uuid.uuid4()

        get_response = await client.get(f"/api/courses/{missing}", headers=auth_headers)
        put_response = await client.put(f"/api/courses/{missing}", json={"name": "X"}, headers=auth_headers)
        delete_response = await client.delete(f"/api/courses/{missing}", headers=auth_headers)

        for response in (get_response, put_response, delete_response):
            assert response.status_code == 404
            assert response.json() == {"error": "Course not found."}
