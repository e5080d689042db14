import pytest

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "test-password"


ADMIN_GET_ENDPOINTS = [
    "/api/admin/destinations",
    "/api/admin/packages",
    "/api/admin/contact-submissions",
    "/api/admin/newsletter-subscriptions",
    "/api/admin/stats",
    "/api/auth/me",
]


@pytest.mark.parametrize("path", ADMIN_GET_ENDPOINTS)
def test_admin_endpoints_require_token(client, path):
    response = client.get(path)

    assert response.status_code == 401


def test_login_with_wrong_password(client):
    response = client.post(
        "/api/auth/login", json={"username": ADMIN_USERNAME, "password": "nope"}
    )

    assert response.status_code == 401


def test_login_returns_token_without_password(client):
    response = client.post(
        "/api/auth/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["tokenType"] == "bearer"
    assert body["user"]["username"] == ADMIN_USERNAME
    assert "passwordHash" not in body["user"]
    assert "password_hash" not in body["user"]


def test_me(client, admin_headers):
    response = client.get("/api/auth/me", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["username"] == ADMIN_USERNAME


def test_logout_revokes_token(client, admin_headers):
    response = client.post("/api/auth/logout", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["data"]["revoked"] is True
    assert client.get("/api/admin/stats", headers=admin_headers).status_code == 401


def test_logout_without_token_still_succeeds(client):
    response = client.post("/api/auth/logout")

    assert response.status_code == 200
    assert response.json()["message"] == "Logout successful"


def test_destination_lifecycle(client, admin_headers):
    created = client.post(
        "/api/admin/destinations",
        json={"name": "Nepal", "type": "international", "imageUrl": "u", "formUrl": "f"},
        headers=admin_headers,
    )
    assert created.status_code == 201
    destination = created.json()
    assert destination["icon"] == "bi-geo-alt-fill"
    assert destination["isActive"] is True

    international = client.get("/api/destinations/international").json()
    assert destination["id"] in [d["id"] for d in international]

    updated = client.put(
        f"/api/admin/destinations/{destination['id']}",
        json={**destination, "formUrl": "https://forms.gle/nepal"},
        headers=admin_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["formUrl"] == "https://forms.gle/nepal"
    assert updated.json()["createdAt"] == destination["createdAt"]

    deleted = client.delete(
        f"/api/admin/destinations/{destination['id']}", headers=admin_headers
    )
    assert deleted.status_code == 200
    assert deleted.json()["data"]["id"] == destination["id"]

    international = client.get("/api/destinations/international").json()
    assert destination["id"] not in [d["id"] for d in international]

    fetched = client.get(
        f"/api/admin/destinations/{destination['id']}", headers=admin_headers
    )
    assert fetched.status_code == 200
    assert fetched.json()["isActive"] is False


def test_destination_not_found(client, admin_headers):
    assert client.put(
        "/api/admin/destinations/missing", json={"name": "x"}, headers=admin_headers
    ).status_code == 404
    assert client.delete(
        "/api/admin/destinations/missing", headers=admin_headers
    ).status_code == 404


def test_package_lifecycle(client, admin_headers):
    created = client.post(
        "/api/admin/packages",
        json={
            "destinationId": "unknown-destination",
            "name": "Andaman Island Hopper",
            "description": "Havelock and Neil islands",
            "imageUrl": "https://example.com/andaman.jpg",
            "pricePerPerson": "24999",
            "duration": "5N/6D",
            "highlights": ["Radhanagar Beach", ""],
            "location": "Port Blair",
            "isFeatured": True,
        },
        headers=admin_headers,
    )
    assert created.status_code == 201
    package = created.json()
    assert package["highlights"] == ["Radhanagar Beach"]
    assert package["isActive"] is True

    assert [p["id"] for p in client.get("/api/packages/featured").json()] == [package["id"]]
    assert client.get(f"/api/packages/{package['id']}").status_code == 200
    by_destination = client.get("/api/destinations/unknown-destination/packages").json()
    assert [p["id"] for p in by_destination] == [package["id"]]

    updated = client.put(
        f"/api/admin/packages/{package['id']}",
        json={"isFeatured": False},
        headers=admin_headers,
    )
    assert updated.json()["isFeatured"] is False
    assert updated.json()["name"] == "Andaman Island Hopper"

    assert client.delete(
        f"/api/admin/packages/{package['id']}", headers=admin_headers
    ).status_code == 200
    assert client.get("/api/packages").json() == []
    assert client.get(f"/api/packages/{package['id']}").status_code == 404
    admin_view = client.get(f"/api/admin/packages/{package['id']}", headers=admin_headers)
    assert admin_view.json()["isActive"] is False


def test_bulk_content_update(client, admin_headers):
    updates = [
        {"key": "hero.title", "value": "Discover India"},
        {"key": "about.intro", "value": "Family run since 2015"},
    ]

    response = client.put("/api/admin/content", json=updates, headers=admin_headers)
    assert response.status_code == 200
    assert [c["key"] for c in response.json()] == ["hero.title", "about.intro"]

    content = client.get("/api/content").json()
    assert content["hero.title"] == "Discover India"
    assert content["about.intro"] == "Family run since 2015"

    # Same handler is mounted on /api/content
    response = client.put(
        "/api/content", json=[{"key": "hero.title", "value": "Again"}], headers=admin_headers
    )
    assert response.status_code == 200
    assert client.get("/api/content").json()["hero.title"] == "Again"


def test_content_update_requires_token(client):
    response = client.put("/api/content", json=[{"key": "hero.title", "value": "x"}])

    assert response.status_code == 401


def test_contact_inbox_and_status(client, admin_headers):
    for subject in ("first", "second"):
        client.post(
            "/api/contact",
            json={
                "firstName": "Amit",
                "lastName": "Das",
                "email": "amit@example.com",
                "subject": subject,
                "message": "Hello",
            },
        )

    inbox = client.get("/api/admin/contact-submissions", headers=admin_headers).json()
    assert len(inbox) == 2
    created = [s["createdAt"] for s in inbox]
    assert created == sorted(created, reverse=True)

    submission_id = inbox[0]["id"]
    response = client.put(
        f"/api/admin/contact-submissions/{submission_id}/status",
        json={"status": "responded"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["status"] == "responded"

    invalid = client.put(
        f"/api/admin/contact-submissions/{submission_id}/status",
        json={"status": "archived"},
        headers=admin_headers,
    )
    assert invalid.status_code == 422

    missing = client.put(
        "/api/admin/contact-submissions/missing/status",
        json={"status": "responded"},
        headers=admin_headers,
    )
    assert missing.status_code == 404


def test_stats(client, admin_headers):
    client.post(
        "/api/contact",
        json={"firstName": "Amit", "email": "amit@example.com", "message": "Hello"},
    )
    client.post("/api/newsletter/subscribe", json={"email": "n@example.com"})

    stats = client.get("/api/admin/stats", headers=admin_headers).json()

    assert stats["contactForms"] == 1
    assert stats["newsletter"] == 1
    assert stats["thisMonth"] == 1
    assert stats["growth"] == 100


def test_newsletter_admin_listing(client, admin_headers):
    client.post("/api/newsletter/subscribe", json={"email": "a@example.com"})
    client.post("/api/newsletter/subscribe", json={"email": "b@example.com"})
    client.post("/api/newsletter/unsubscribe", json={"email": "b@example.com"})

    response = client.get("/api/admin/newsletter-subscriptions", headers=admin_headers)

    assert [s["email"] for s in response.json()] == ["a@example.com"]


def test_gallery_admin_flow(client, admin_headers):
    assert client.post(
        "/api/gallery", json={"imageUrl": "https://example.com/taj.jpg"}
    ).status_code == 401

    created = client.post(
        "/api/gallery",
        json={"imageUrl": "https://example.com/taj.jpg", "caption": "Taj Mahal"},
        headers=admin_headers,
    )
    assert created.status_code == 201
    image_id = created.json()["id"]
    assert [i["id"] for i in client.get("/api/gallery").json()] == [image_id]

    removed = client.delete(f"/api/admin/gallery/{image_id}", headers=admin_headers)
    assert removed.status_code == 200
    assert client.get("/api/gallery").json() == []
    assert client.delete(
        "/api/admin/gallery/missing", headers=admin_headers
    ).status_code == 404


def test_destination_update_rejects_blank_name(client, admin_headers):
    created = client.post(
        "/api/admin/destinations",
        json={"name": "Nepal", "type": "international", "imageUrl": "u", "formUrl": "f"},
        headers=admin_headers,
    ).json()

    response = client.put(
        f"/api/admin/destinations/{created['id']}",
        json={"name": ""},
        headers=admin_headers,
    )

    assert response.status_code == 422
    fetched = client.get(f"/api/admin/destinations/{created['id']}", headers=admin_headers)
    assert fetched.json()["name"] == "Nepal"
