API = "/api/v1"


def add_plant(client, name="Fern", days="7", image=None):
    files = {"image": ("plant.png", image, "image/png")} if image is not None else None
    return client.post(
        f"{API}/plants",
        data={"name": name, "description": "Kitchen", "watering_frequency_days": days},
        files=files,
    )


def test_health(client):
    response = client.get(f"{API}/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["storage"]["backend"] == "memory"


def test_request_id_is_echoed(client):
    response = client.get(f"{API}/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


def test_add_plant_returns_reminder(client):
    response = add_plant(client)

    assert response.status_code == 201
    body = response.json()
    assert body["plant"]["name"] == "Fern"
    assert body["plant"]["last_watered_date"] == "2024-01-01"
    assert body["reminder"]["fire_date"] == "2024-01-08"
    assert body["reminder"]["title"] == "Time to water 🌿 Fern"
    assert body["reminder"]["scheduled"] is True
    assert body["persisted"] is True
    assert body["warnings"] == []


def test_add_plant_with_photo_and_download_it(client, png_bytes):
    plant = add_plant(client, image=png_bytes).json()["plant"]
    assert plant["image_count"] == 1

    image = client.get(f"{API}/plants/{plant['plant_id']}/images/0")

    assert image.status_code == 200
    assert image.headers["content-type"] == "image/jpeg"
    assert image.content.startswith(b"\xff\xd8")


def test_add_plant_with_bad_photo_warns(client):
    response = add_plant(client, image=b"garbage")

    assert response.status_code == 201
    assert response.json()["plant"]["image_count"] == 0
    assert response.json()["warnings"]


def test_empty_name_is_rejected(client):
    response = add_plant(client, name="")

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
    assert client.get(f"{API}/plants").json()["count"] == 0


def test_frequency_out_of_range_is_rejected(client):
    for days in ("0", "31"):
        response = add_plant(client, days=days)

        assert response.status_code == 422
        assert response.json()["error"]["details"]["field"] == "watering_frequency_days"


def test_list_and_get_plants(client):
    first = add_plant(client, name="A").json()["plant"]
    add_plant(client, name="B")

    listing = client.get(f"{API}/plants").json()
    single = client.get(f"{API}/plants/{first['plant_id']}")

    assert listing["count"] == 2
    assert [p["name"] for p in listing["plants"]] == ["A", "B"]
    assert single.status_code == 200
    assert single.json()["description"] == "Kitchen"


def test_unknown_plant_is_404(client):
    response = client.get(f"{API}/plants/unknown")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "PLANT_NOT_FOUND"


def test_add_photo_to_plant(client, png_bytes):
    plant_id = add_plant(client).json()["plant"]["plant_id"]

    response = client.post(
        f"{API}/plants/{plant_id}/images",
        files={"image": ("second.png", png_bytes, "image/png")},
    )
    rejected = client.post(
        f"{API}/plants/{plant_id}/images",
        files={"image": ("bad.png", b"nope", "image/png")},
    )

    assert response.status_code == 200
    assert response.json()["plant"]["image_count"] == 1
    assert rejected.status_code == 422
    assert rejected.json()["error"]["code"] == "INVALID_IMAGE"


def test_reminder_endpoint(client):
    plant_id = add_plant(client, days="3").json()["plant"]["plant_id"]

    response = client.get(f"{API}/plants/{plant_id}/reminder")

    assert response.status_code == 200
    assert response.json()["fire_date"] == "2024-01-04"
    assert response.json()["fire_at"] == "2024-01-04T09:00:00"


def test_delete_plants(client):
    for name in ("A", "B", "C"):
        add_plant(client, name=name)

    response = client.delete(f"{API}/plants", params=[("indices", 0), ("indices", 2)])

    assert response.status_code == 200
    assert [p["name"] for p in response.json()["removed"]] == ["A", "C"]
    assert response.json()["cancelled_reminders"] == 2
    assert [p["name"] for p in client.get(f"{API}/plants").json()["plants"]] == ["B"]


def test_delete_out_of_range(client):
    add_plant(client)

    response = client.delete(f"{API}/plants", params={"indices": 5})

    assert response.status_code == 422


def test_calendar_month(client):
    response = client.get(f"{API}/calendar", params={"date": "2024-03-01"})

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "March 2024"
    assert len(body["days"]) == 42
    assert len(body["weeks"]) == 6
    assert body["days"][0]["date"] == "2024-02-25"
    assert body["days"][0]["is_current_month"] is False


def test_calendar_defaults_to_today_and_navigates(client):
    current = client.get(f"{API}/calendar").json()
    previous = client.get(f"{API}/calendar", params={"offset": -1}).json()

    assert current["title"] == "January 2024"
    assert [d for d in current["days"] if d["is_today"]][0]["date"] == "2024-01-01"
    assert previous["title"] == "December 2023"


def test_mark_and_clear_watered_day(client):
    marked = client.post(f"{API}/calendar/2024-03-12/watered")
    custom = client.post(f"{API}/calendar/2024-03-13/watered", json={"marker": "🌱"})

    assert marked.status_code == 200
    assert marked.json()["marker"] == "💧"
    assert custom.json()["marker"] == "🌱"

    days = {d["date"]: d for d in client.get(f"{API}/calendar", params={"date": "2024-03-01"}).json()["days"]}
    assert days["2024-03-12"]["label"] == "💧"
    assert days["2024-03-13"]["marker"] == "🌱"

    cleared = client.delete(f"{API}/calendar/2024-03-12/watered")
    assert cleared.json()["cleared"] is True
    assert client.delete(f"{API}/calendar/2024-03-12/watered").json()["cleared"] is False


def test_invalid_calendar_day_is_422(client):
    response = client.post(f"{API}/calendar/2024-02-30/watered")

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
