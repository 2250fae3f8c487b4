"""Employee Routes — HTTP contract and error-to-status mapping.

Invariants:
    - POST /employees returns 201 with a generated employeeId (camelCase body)
    - Field validation failures return 400 with field-level details
    - Unknown employee → 404 EMPLOYEE_NOT_FOUND; unknown/empty department → 404
    - Duplicate email → 400 STORAGE_INTEGRITY_ERROR (not a validation error)
    - Filter accepts legacy sentinels and rejects non-numeric bounds with 400
    - Admin DELETE returns 204, then the employee is gone

Design Decisions:
    - State is seeded and inspected through the API only: the client's sessions
      are the only writers
"""

import sys

import pytest

EMPLOYEES = "/api/v1/employees"


async def _create(client, **overrides) -> dict:
    body = {
        "employeeName": "Alice Smith",
        "email": "alice@x.com",
        "salary": 60000,
    }
    body.update(overrides)
    res = await client.post(EMPLOYEES, json=body)
    assert res.status_code == 201, res.text
    return res.json()


@pytest.fixture
async def staff(client):
    return [
        await _create(client, employeeName="Ann Engineer", email="ann@acme.io",
                      department="Engineering", salary=50000),
        await _create(client, employeeName="Ben Engineer", email="ben@acme.io",
                      department="Engineering", salary=80000),
        await _create(client, employeeName="Cat Seller", email="cat@acme.io",
                      department="Sales", salary=50000),
    ]


def _ids(employees: list[dict]) -> set[str]:
    return {e["employeeId"] for e in employees}


async def test_create_returns_201_with_generated_id(client):
    created = await _create(client, employeeId="caller-chosen")
    assert created["employeeId"] != "caller-chosen"
    assert len(created["employeeId"]) == 36
    assert created["employeeName"] == "Alice Smith"
    assert created["salary"] == 60000.0


async def test_alice_scenario_create_get_update(client):
    created = await _create(client)
    employee_id = created["employeeId"]

    res = await client.get(f"{EMPLOYEES}/{employee_id}")
    assert res.status_code == 200
    assert res.json() == created

    res = await client.put(f"{EMPLOYEES}/{employee_id}", json={
        "employeeName": "Alice S.",
        "email": "alice@x.com",
        "phoneNumber": "1234567890",
        "address": "1 Main St",
        "salary": 1,
    })
    assert res.status_code == 200
    updated = res.json()
    assert updated["employeeId"] == employee_id
    assert updated["employeeName"] == "Alice S."
    assert updated["salary"] == 60000.0
    assert updated["phoneNumber"] == "1234567890"


@pytest.mark.parametrize("override, field", [
    ({"employeeName": "Al"}, "employeeName"),
    ({"email": "not-an-email"}, "email"),
    ({"phoneNumber": "12345"}, "phoneNumber"),
    ({"salary": "lots"}, "salary"),
])
async def test_create_validation_failure_returns_400(client, override, field):
    body = {"employeeName": "Alice Smith", "email": "alice@x.com", "salary": 1}
    body.update(override)

    res = await client.post(EMPLOYEES, json=body)

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(field in d["field"] for d in error["details"])


@pytest.mark.parametrize("token", ["Infinity", "-Infinity", "NaN"])
async def test_create_non_finite_salary_returns_400(client, token):
    body = (
        '{"employeeName": "Alice Smith", "email": "alice@x.com", '
        f'"salary": {token}}}'
    )

    res = await client.post(
        EMPLOYEES, content=body, headers={"content-type": "application/json"},
    )

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any("salary" in d["field"] for d in error["details"])
    assert (await client.get(f"{EMPLOYEES}/count")).json() == 0


async def test_invalid_email_reports_legacy_message(client):
    res = await client.post(EMPLOYEES, json={
        "employeeName": "Alice Smith", "email": "not-an-email", "salary": 1,
    })

    details = res.json()["error"]["details"]
    assert any("Invalid email format" in d["message"] for d in details)


async def test_email_kept_exactly_as_sent(client):
    created = await _create(client, email="Alice@X.COM")
    assert created["email"] == "Alice@X.COM"

    res = await client.get(f"{EMPLOYEES}/{created['employeeId']}")
    assert res.json()["email"] == "Alice@X.COM"


async def test_create_without_salary_returns_400(client):
    res = await client.post(EMPLOYEES, json={
        "employeeName": "Alice Smith", "email": "alice@x.com",
    })
    assert res.status_code == 400


async def test_duplicate_email_returns_storage_integrity_400(client):
    await _create(client, email="dup@acme.io")

    res = await client.post(EMPLOYEES, json={
        "employeeName": "Someone Else", "email": "dup@acme.io", "salary": 1,
    })

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "STORAGE_INTEGRITY_ERROR"
    assert error["message"].startswith("Database error occurred: ")


async def test_get_unknown_employee_returns_404(client):
    res = await client.get(f"{EMPLOYEES}/does-not-exist")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "EMPLOYEE_NOT_FOUND"


async def test_update_unknown_employee_returns_404(client):
    res = await client.put(f"{EMPLOYEES}/does-not-exist", json={
        "employeeName": "Nobody Here", "email": "n@acme.io",
    })
    assert res.status_code == 404


async def test_update_invalid_payload_returns_400(client):
    created = await _create(client)
    res = await client.put(f"{EMPLOYEES}/{created['employeeId']}", json={
        "employeeName": "Alice Smith", "email": "alice@x.com",
        "phoneNumber": "abc",
    })
    assert res.status_code == 400


async def test_admin_delete_returns_204_then_404(client):
    created = await _create(client)
    employee_id = created["employeeId"]

    res = await client.delete(f"/api/v1/admin/employees/{employee_id}")
    assert res.status_code == 204

    res = await client.get(f"{EMPLOYEES}/{employee_id}")
    assert res.status_code == 404

    res = await client.delete(f"/api/v1/admin/employees/{employee_id}")
    assert res.status_code == 404


async def test_listings_and_count(client, staff):
    res = await client.get(f"{EMPLOYEES}/names")
    assert sorted(res.json()) == ["Ann Engineer", "Ben Engineer", "Cat Seller"]

    res = await client.get(f"{EMPLOYEES}/count")
    assert res.json() == 3

    res = await client.get(EMPLOYEES)
    assert _ids(res.json()) == _ids(staff)


async def test_department_names(client, staff):
    res = await client.get(f"{EMPLOYEES}/departments/Sales/names")
    assert res.status_code == 200
    assert res.json() == ["Cat Seller"]


async def test_unknown_department_returns_404(client, staff):
    res = await client.get(f"{EMPLOYEES}/departments/Nowhere/names")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "DEPARTMENT_NOT_FOUND"


async def test_filter_with_legacy_sentinels_returns_everyone(client, staff):
    res = await client.get(f"{EMPLOYEES}/filter", params={
        "department": "",
        "minSalary": "0",
        "maxSalary": repr(sys.float_info.max),
    })
    assert res.status_code == 200
    assert _ids(res.json()) == _ids(staff)


async def test_filter_without_parameters_returns_everyone(client, staff):
    res = await client.get(f"{EMPLOYEES}/filter")
    assert _ids(res.json()) == _ids(staff)


async def test_filter_exact_salary(client, staff):
    res = await client.get(f"{EMPLOYEES}/filter", params={
        "minSalary": 50000, "maxSalary": 50000,
    })
    assert _ids(res.json()) == {staff[0]["employeeId"], staff[2]["employeeId"]}


async def test_filter_department_and_bounds(client, staff):
    res = await client.get(f"{EMPLOYEES}/filter", params={
        "department": "Engineering", "maxSalary": 60000,
    })
    assert _ids(res.json()) == {staff[0]["employeeId"]}


async def test_filter_no_match_returns_empty_list(client, staff):
    res = await client.get(f"{EMPLOYEES}/filter", params={"department": "Legal"})
    assert res.status_code == 200
    assert res.json() == []


@pytest.mark.parametrize("param, value", [
    ("minSalary", "cheap"),
    ("minSalary", "nan"),
    ("minSalary", "inf"),
    ("maxSalary", "NaN"),
    ("maxSalary", "-Infinity"),
])
async def test_filter_malformed_bound_returns_400(client, param, value):
    res = await client.get(f"{EMPLOYEES}/filter", params={param: value})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
