import pytest

from repositories.models import ContactSubmission, ContactSubmissionCreate


def _form(subject):
    return ContactSubmissionCreate(
        first_name="Asha",
        last_name="Roy",
        email="asha@example.com",
        subject=subject,
        message="Planning a trip to Sikkim",
    )


@pytest.mark.asyncio
async def test_create_starts_pending(empty_storage):
    submission = await empty_storage.contact_submissions.create(_form("Hello"))

    assert submission.status == "pending"
    assert submission.created_at is not None


@pytest.mark.asyncio
async def test_listing_is_newest_first(empty_storage):
    repo = empty_storage.contact_submissions
    for subject in ("first", "second", "third"):
        await repo.create(_form(subject))

    subjects = [s.subject for s in await repo.get_all()]

    assert subjects == ["third", "second", "first"]


@pytest.mark.asyncio
async def test_missing_timestamp_sorts_last(empty_storage):
    repo = empty_storage.contact_submissions
    await repo.create(_form("dated"))
    repo.load(
        [
            ContactSubmission(
                id="legacy",
                first_name="Old",
                last_name="Entry",
                email="old@example.com",
                subject="undated",
                message="imported",
                created_at=None,
            )
        ]
    )

    subjects = [s.subject for s in await repo.get_all()]

    assert subjects == ["dated", "undated"]


@pytest.mark.asyncio
async def test_update_status(empty_storage):
    repo = empty_storage.contact_submissions
    submission = await repo.create(_form("Hello"))

    updated = await repo.update_status(submission.id, "responded")

    assert updated.status == "responded"
    assert updated.message == submission.message
    assert await repo.update_status("missing", "responded") is None
