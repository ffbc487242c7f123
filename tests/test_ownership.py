"""Nothing one user creates is visible to, or changeable by, another."""
from conftest import create_employee, create_project, create_task


def test_employees_are_isolated(client, alice, bob):
    emp = create_employee(client, alice)
    url = f"/api/employees/{emp['id']}"

    assert client.get("/api/employees", headers=bob).json()["employees"] == []
    assert client.get(url, headers=bob).status_code == 404
    resp = client.patch(url, json={"name": "Hijack", "joiningDate": "2024-01-01", "basicSalary": 1}, headers=bob)
    assert resp.status_code == 404
    assert client.delete(url, headers=bob).status_code == 404

    assert client.get(url, headers=alice).json()["employee"]["name"] == emp["name"]


def test_employee_codes_are_per_owner(client, alice, bob):
    create_employee(client, alice)
    create_employee(client, alice)

    assert create_employee(client, bob)["employeeId"] == "EMP001"


def test_projects_are_isolated(client, alice, bob):
    project = create_project(client, alice)
    url = f"/api/projects/{project['id']}"

    assert client.get("/api/projects", headers=bob).json()["projects"] == []
    assert client.get(url, headers=bob).status_code == 404
    assert client.patch(url, json={"name": "Hijack"}, headers=bob).status_code == 404
    assert client.delete(url, headers=bob).status_code == 404

    assert client.get(url, headers=alice).json()["project"]["name"] == project["name"]


def test_tasks_are_isolated(client, alice, bob):
    project = create_project(client, alice)
    task = create_task(client, alice, project["id"])
    url = f"/api/tasks/{task['id']}"

    assert client.get("/api/tasks", headers=bob).json()["tasks"] == []
    assert client.get(f"/api/tasks?projectId={project['id']}", headers=bob).json()["tasks"] == []
    # another user's task reads as missing, not forbidden
    resp = client.get(url, headers=bob)
    assert resp.status_code == 404
    assert resp.json() == {"message": "Task not found"}
    assert client.patch(url, json={"status": "DONE"}, headers=bob).status_code == 404
    assert client.delete(url, headers=bob).status_code == 404

    assert client.get(url, headers=alice).json()["task"]["status"] == "BACKLOG"


def test_cannot_create_tasks_in_someone_elses_project_or_for_their_employee(client, alice, bob):
    alice_project = create_project(client, alice)
    bob_project = create_project(client, bob)
    bob_emp = create_employee(client, bob)

    resp = client.post("/api/tasks", json={"title": "x", "projectId": alice_project["id"]}, headers=bob)
    assert resp.status_code == 404

    resp = client.post(
        "/api/tasks", json={"title": "x", "projectId": alice_project["id"], "assigneeId": bob_emp["id"]}, headers=alice
    )
    assert resp.status_code == 404

    assert create_task(client, bob, bob_project["id"], assigneeId=bob_emp["id"])["assigneeId"] == bob_emp["id"]


def test_salaries_are_isolated(client, alice, bob):
    emp = create_employee(client, alice)
    client.post(
        "/api/salary",
        json={"month": 2, "year": 2024, "salaries": [{"employeeId": emp["id"], "basicSalary": 100}]},
        headers=alice,
    )

    assert client.get("/api/salary?month=2&year=2024", headers=bob).json()["salaries"] == []
    assert client.get(f"/api/salary?month=2&year=2024&employeeId={emp['id']}", headers=bob).json()["salaries"] == []

    results = client.post(
        "/api/salary",
        json={"month": 2, "year": 2024, "salaries": [{"employeeId": emp["id"], "basicSalary": 1, "bonus": 0}]},
        headers=bob,
    ).json()["results"]
    assert results == [{"error": f"Employee not found: {emp['id']}"}]

    stored = client.get("/api/salary?month=2&year=2024", headers=alice).json()["salaries"]
    assert stored[0]["basicSalary"] == 100


def test_dashboard_only_shows_own_data(client, alice, bob):
    project = create_project(client, alice)
    create_task(client, alice, project["id"])
    create_employee(client, alice)

    assert client.get("/api/dashboard", headers=bob).json() == {"employees": [], "projects": [], "tasks": []}
