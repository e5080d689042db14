from datetime import datetime, timezone

import pytest

from core.config import Settings
from core.security import hash_password
from repositories import MemStorage
from repositories.models import (
    ContactStatus,
    ContactSubmission,
    ContactSubmissionCreate,
    ContentCreate,
    NewsletterSubscriptionCreate,
    PackageCreate,
    PackageUpdate,
)
from services import (
    AuthService,
    ContactService,
    ContentService,
    PackageService,
    StatsService,
)
from services.stats_service import growth_percent


@pytest.fixture
def auth_service():
    storage = MemStorage(
        admin_username="admin",
        admin_password_hash=hash_password("pw", rounds=4),
        seed=False,
    )
    settings = Settings(JWT_SECRET_KEY="unit-secret", LOG_TO_FILE=False)
    return AuthService(storage.users, settings)


@pytest.mark.asyncio
async def test_login_and_resolve_token(auth_service):
    result = await auth_service.login("admin", "pw")

    assert result["token_type"] == "bearer"
    user = await auth_service.resolve_token(result["token"])
    assert user.username == "admin"


@pytest.mark.asyncio
async def test_login_rejects_bad_credentials(auth_service):
    assert await auth_service.login("admin", "wrong") is None
    assert await auth_service.login("nobody", "pw") is None


@pytest.mark.asyncio
async def test_logout_revokes_token(auth_service):
    token = (await auth_service.login("admin", "pw"))["token"]

    assert await auth_service.logout(token) is True
    assert await auth_service.resolve_token(token) is None


@pytest.mark.asyncio
async def test_logout_ignores_missing_or_garbage_tokens(auth_service):
    assert await auth_service.logout(None) is False
    assert await auth_service.logout("garbage") is False


@pytest.mark.asyncio
async def test_logout_forgets_expired_revocations(auth_service):
    auth_service._revoked["stale-jti"] = 0
    token = (await auth_service.login("admin", "pw"))["token"]

    assert await auth_service.logout(token) is True

    assert "stale-jti" not in auth_service._revoked
    assert len(auth_service._revoked) == 1
    assert await auth_service.resolve_token(token) is None


@pytest.mark.asyncio
async def test_content_map_and_bulk_set(storage):
    service = ContentService(storage.content)

    saved = await service.set_many(
        [
            ContentCreate(key="hero.title", value="New title"),
            ContentCreate(key="about.story", value="Since 2015"),
        ]
    )

    content = await service.get_content_map()
    assert [c.key for c in saved] == ["hero.title", "about.story"]
    assert content["hero.title"] == "New title"
    assert content["about.story"] == "Since 2015"
    assert content["contact.phone"] == "+91 8100331032"


@pytest.mark.asyncio
async def test_package_service_drops_blank_highlights(empty_storage):
    service = PackageService(empty_storage.packages)

    package = await service.create_package(
        PackageCreate(destination_id="d1", name="Goa Beaches", highlights=["", " Baga ", "  "])
    )
    assert package.highlights == ["Baga"]

    updated = await service.update_package(
        package.id, PackageUpdate(highlights=["Calangute", ""])
    )
    assert updated.highlights == ["Calangute"]


@pytest.mark.asyncio
async def test_inactive_package_hidden_from_public_lookup(empty_storage):
    service = PackageService(empty_storage.packages)
    package = await service.create_package(PackageCreate(destination_id="d1", name="Kerala"))

    await service.delete_package(package.id)

    assert await service.get_active_package(package.id) is None
    assert (await service.get_package(package.id)).is_active is False


@pytest.mark.asyncio
async def test_contact_service_status_update(empty_storage):
    service = ContactService(empty_storage.contact_submissions)
    submission = await service.submit(
        ContactSubmissionCreate(first_name="Ravi", email="r@example.com", message="Hi")
    )

    updated = await service.update_status(submission.id, ContactStatus.RESPONDED)

    assert updated.status == "responded"


def test_growth_percent():
    assert growth_percent(6, 5) == 20
    assert growth_percent(2, 4) == -50
    assert growth_percent(3, 0) == 100
    assert growth_percent(0, 0) == 0


def _submission(submission_id, created_at):
    return ContactSubmission(
        id=submission_id,
        first_name="A",
        last_name="B",
        email="a@example.com",
        subject="s",
        message="m",
        created_at=created_at,
    )


@pytest.mark.asyncio
async def test_stats_counts(empty_storage):
    utc = timezone.utc
    empty_storage.contact_submissions.load(
        [
            _submission("this-1", datetime(2024, 3, 2, tzinfo=utc)),
            _submission("this-2", datetime(2024, 3, 20, tzinfo=utc)),
            _submission("last-1", datetime(2024, 2, 10, tzinfo=utc)),
            _submission("older", datetime(2023, 12, 31, tzinfo=utc)),
            _submission("undated", None),
        ]
    )
    newsletter = empty_storage.newsletter_subscriptions
    await newsletter.create(NewsletterSubscriptionCreate(email="a@example.com"))
    await newsletter.create(NewsletterSubscriptionCreate(email="b@example.com"))
    await newsletter.deactivate("b@example.com")

    service = StatsService(empty_storage.contact_submissions, newsletter)
    stats = await service.get_stats(now=datetime(2024, 3, 25, tzinfo=utc))

    assert stats == {"contactForms": 5, "newsletter": 1, "thisMonth": 2, "growth": 100}


@pytest.mark.asyncio
async def test_stats_january_compares_with_december(empty_storage):
    utc = timezone.utc
    empty_storage.contact_submissions.load(
        [
            _submission("jan", datetime(2024, 1, 5, tzinfo=utc)),
            _submission("dec-1", datetime(2023, 12, 5, tzinfo=utc)),
            _submission("dec-2", datetime(2023, 12, 6, tzinfo=utc)),
        ]
    )

    service = StatsService(
        empty_storage.contact_submissions, empty_storage.newsletter_subscriptions
    )
    stats = await service.get_stats(now=datetime(2024, 1, 10))

    assert stats["thisMonth"] == 1
    assert stats["growth"] == -50
