"""Integration tests for task API endpoints."""


def create(client, **overrides):
    payload = {
        "title": "Buy milk",
        "priority": "HIGH",
        "due_date": "2024-01-05",
        "status": False,
    }
    payload.update(overrides)
    response = client.post("/api/v1/tasks", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_and_get_task(client):
    """Test creating a task via API and reading it back."""
    task = create(client, description="Two litres")

    assert task["id"] > 0
    assert task["title"] == "Buy milk"
    assert task["description"] == "Two litres"
    assert task["priority"] == "HIGH"
    assert task["due_date"] == "2024-01-05"
    assert task["deleted_at"] is None

    response = client.get(f"/api/v1/tasks/{task['id']}")
    assert response.status_code == 200
    assert response.json()["title"] == "Buy milk"


def test_create_task_validation(client):
    response = client.post(
        "/api/v1/tasks",
        json={"title": "x", "priority": "HIGH", "due_date": "2024-01-05"},
    )
    assert response.status_code == 422

    response = client.post(
        "/api/v1/tasks",
        json={"title": "Valid title", "priority": "SOMEDAY", "due_date": "2024-01-05"},
    )
    assert response.status_code == 422


def test_list_tasks_filters_and_counts(client):
    """The list endpoint applies the view-model and reports unfiltered counts."""
    create(client, title="Buy milk", priority="HIGH", due_date="2024-01-05", status=False)
    create(client, title="Call bank", priority="LOW", due_date="2024-01-01", status=True)

    response = client.get(
        "/api/v1/tasks",
        params={"status": "PENDING", "sort_field": "due_date", "sort_direction": "asc", "page": 1, "page_size": 5},
    )

    assert response.status_code == 200
    body = response.json()
    assert [t["title"] for t in body["items"]] == ["Buy milk"]
    assert body["total_filtered_count"] == 1
    assert body["total_pages"] == 1
    assert body["counts"] == {"total": 2, "pending": 1, "completed": 1}
    assert body["page_links"] == [1]


def test_list_tasks_sort_and_paginate(client):
    for i, priority in enumerate(["LOW", "HIGH", "MEDIUM", "HIGH", "LOW", "MEDIUM", "HIGH"]):
        create(client, title=f"Task {i}", priority=priority, due_date=f"2024-01-0{i + 1}")

    first = client.get(
        "/api/v1/tasks",
        params={"sort_field": "priority", "sort_direction": "desc", "page_size": 3},
    ).json()
    second = client.get(
        "/api/v1/tasks",
        params={"sort_field": "priority", "sort_direction": "desc", "page_size": 3, "page": 2},
    ).json()

    assert first["total_filtered_count"] == 7
    assert first["total_pages"] == 3
    assert [t["priority"] for t in first["items"]] == ["HIGH", "HIGH", "HIGH"]
    assert [t["priority"] for t in second["items"]] == ["MEDIUM", "MEDIUM", "LOW"]
    assert first["page_links"] == [1, 2, 3]


def test_list_tasks_search_and_tab(client):
    create(client, title="Buy milk", priority="LOW", status=True)
    create(client, title="Buy bread", priority="LOW", status=False)
    create(client, title="Call bank", priority="HIGH", status=False)

    body = client.get("/api/v1/tasks", params={"search": "buy", "tab": "PENDING"}).json()

    assert [t["title"] for t in body["items"]] == ["Buy bread"]


def test_list_tasks_page_beyond_range(client):
    create(client)
    create(client, title="Call bank")

    response = client.get("/api/v1/tasks", params={"page": 3, "page_size": 5})

    assert response.status_code == 200
    body = response.json()
    assert body["items"] == []
    assert body["total_filtered_count"] == 2
    assert body["page_links"] == [1]


def test_list_tasks_rejects_bad_paging(client):
    assert client.get("/api/v1/tasks", params={"page": 0}).status_code == 422
    assert client.get("/api/v1/tasks", params={"page_size": 0}).status_code == 422


def test_empty_list(client):
    body = client.get("/api/v1/tasks").json()

    assert body["items"] == []
    assert body["total_pages"] == 0
    assert body["counts"] == {"total": 0, "pending": 0, "completed": 0}
    assert body["page_links"] == []


def test_replace_task(client):
    task = create(client)

    response = client.put(
        f"/api/v1/tasks/{task['id']}",
        json={"title": "Buy oat milk", "priority": "MEDIUM", "due_date": "2024-02-01", "status": True},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Buy oat milk"
    assert body["priority"] == "MEDIUM"
    assert body["status"] is True


def test_patch_task(client):
    task = create(client)

    response = client.patch(f"/api/v1/tasks/{task['id']}", json={"priority": "LOW"})

    assert response.status_code == 200
    assert response.json()["priority"] == "LOW"
    assert response.json()["title"] == "Buy milk"


def test_patch_task_rejects_null_priority(client):
    task = create(client)

    response = client.patch(f"/api/v1/tasks/{task['id']}", json={"priority": None})

    assert response.status_code == 422


def test_complete_task(client):
    task = create(client)

    response = client.post(f"/api/v1/tasks/{task['id']}/complete")

    assert response.status_code == 200
    assert response.json()["status"] is True


def test_delete_task_is_soft(client):
    """Deleted tasks disappear from reads and cannot be deleted again."""
    task = create(client)
    create(client, title="Call bank")

    response = client.delete(f"/api/v1/tasks/{task['id']}")
    assert response.status_code == 204

    assert client.get(f"/api/v1/tasks/{task['id']}").status_code == 404
    assert client.delete(f"/api/v1/tasks/{task['id']}").status_code == 404

    body = client.get("/api/v1/tasks").json()
    assert [t["title"] for t in body["items"]] == ["Call bank"]
    assert body["counts"]["total"] == 1


def test_unknown_task_localized(client):
    response = client.get("/api/v1/tasks/999", headers={"Accept-Language": "id-ID,id;q=0.9"})

    assert response.status_code == 404
    assert response.json()["detail"] == "Tugas 999 tidak ditemukan"


def test_view_options(client):
    response = client.get("/api/v1/meta/options", headers={"Accept-Language": "id"})

    assert response.status_code == 200
    body = response.json()
    assert body["locale"] == "id"
    assert {"value": "HIGH", "label": "Tinggi"} in body["priorities"]
    assert [f["value"] for f in body["sort_fields"]] == ["due_date", "priority", "title"]
    assert body["page_size_options"] == [5, 10, 15, 20]
    assert body["max_page_links"] == 5


def test_translations(client):
    assert set(client.get("/api/v1/meta/locales").json()) == {"en", "id"}
    assert client.get("/api/v1/meta/translations/en").json()["priority.HIGH"] == "High"
    assert client.get("/api/v1/meta/translations/fr").status_code == 404


def test_health_and_metrics(client):
    health = client.get("/health")
    assert health.status_code == 200
    assert health.json()["checks"]["database"] == "ok"

    create(client)
    metrics = client.get("/metrics")
    assert metrics.status_code == 200
    assert "task_operations_total" in metrics.text
    assert "http_requests_total" in metrics.text


def test_create_task_reports_field_errors(client):
    """Form errors come back as a per-field list from the task editor."""
    response = client.post(
        "/api/v1/tasks",
        json={"title": "x", "priority": "HIGH", "due_date": "2024-01-05"},
    )

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert isinstance(detail, list)
    assert ["title"] in [err["loc"] for err in detail]


def test_create_task_ignores_body_id(client):
    existing = create(client)

    task = create(client, id=existing["id"], title="Call bank")

    assert task["id"] != existing["id"]
    assert client.get(f"/api/v1/tasks/{existing['id']}").json()["title"] == "Buy milk"


def test_replace_unknown_task(client):
    response = client.put(
        "/api/v1/tasks/999",
        json={"title": "Buy oat milk", "priority": "MEDIUM", "due_date": "2024-02-01"},
    )

    assert response.status_code == 404


def test_unsupported_locale_translations(client):
    response = client.get("/api/v1/meta/translations/fr")

    assert response.status_code == 404
    assert response.json()["detail"] == "Locale 'fr' is not supported"
