"""Integration tests for application service against a real SQLite database."""

import asyncio
from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from recruitment.core.exceptions import (
    InvalidCompetenceError,
    InvalidDateRangeError,
    InvalidInputError,
    InvalidStatusError,
    NotFoundError,
    VersionConflictError,
)
from recruitment.models.application import ApplicationStatus
from recruitment.repositories import ApplicationRepository
from recruitment.schemas.application import ApplicationForm
from recruitment.services.versioning import ExpectedVersion, Unconditional


class TestSubmitApplication:
    """Tests for application submission."""

    @pytest.mark.asyncio
    async def test_first_submission_creates_unhandled_application(
        self, application_service, applicant, sample_application_form
    ):
        """Test that a first submission creates one UNHANDLED application."""
        application = await application_service.submit_application(
            applicant.id, sample_application_form
        )

        assert application.id is not None
        assert application.person_id == applicant.id
        assert application.status == ApplicationStatus.UNHANDLED
        assert application.version == 1
        assert await application_service.has_application(applicant.id) is True

    @pytest.mark.asyncio
    async def test_children_match_submitted_input(
        self, application_service, applicant, sample_application_form
    ):
        """Test that stored competences and availabilities equal the input."""
        application = await application_service.submit_application(
            applicant.id, sample_application_form
        )
        details = await application_service.get_application_details(application.id)

        assert sorted(
            (c.competence_name, c.years_of_experience) for c in details.competences
        ) == [("lotteries", Decimal("1.00")), ("ticket sales", Decimal("3.50"))]
        assert [(a.from_date, a.to_date) for a in details.availabilities] == [
            (date(2026, 6, 1), date(2026, 8, 31))
        ]

    @pytest.mark.asyncio
    async def test_resubmission_replaces_children_and_keeps_application(
        self, application_service, applicant, sample_application_form, competence_ids
    ):
        """Test that resubmitting supersedes children but keeps id and status."""
        first = await application_service.submit_application(
            applicant.id, sample_application_form
        )
        accepted = await application_service.set_status(
            first.id, ApplicationStatus.ACCEPTED
        )

        replacement = ApplicationForm(
            competences=[
                {
                    "competence_id": competence_ids["roller coaster operation"],
                    "years_of_experience": "7",
                }
            ],
            availabilities=[
                {"from_date": "2027-01-01", "to_date": "2027-01-31"},
                {"from_date": "2027-03-01", "to_date": "2027-03-01"},
            ],
        )
        second = await application_service.submit_application(applicant.id, replacement)
        details = await application_service.get_application_details(second.id)

        assert second.id == first.id
        assert second.status == ApplicationStatus.ACCEPTED
        assert second.version == accepted.version
        assert [c.competence_name for c in details.competences] == [
            "roller coaster operation"
        ]
        assert len(details.availabilities) == 2

    @pytest.mark.asyncio
    async def test_incomplete_entries_are_skipped(
        self, application_service, applicant, competence_ids
    ):
        """Test that entries missing a field are ignored, not rejected."""
        form = ApplicationForm(
            competences=[
                {"competence_id": competence_ids["lotteries"], "years_of_experience": "2"},
                {"competence_id": competence_ids["ticket sales"]},
                {"years_of_experience": "4"},
            ],
            availabilities=[
                {"from_date": "2026-05-01"},
                {"from_date": "2026-05-01", "to_date": "2026-05-10"},
            ],
        )
        application = await application_service.submit_application(applicant.id, form)
        details = await application_service.get_application_details(application.id)

        assert [c.competence_name for c in details.competences] == ["lotteries"]
        assert len(details.availabilities) == 1

    @pytest.mark.asyncio
    async def test_unknown_competence_leaves_prior_state(
        self, application_service, applicant, sample_application_form
    ):
        """Test that an unknown competence id fails without partial writes."""
        application = await application_service.submit_application(
            applicant.id, sample_application_form
        )
        bad_form = ApplicationForm(
            competences=[{"competence_id": 9999, "years_of_experience": "1"}],
            availabilities=[{"from_date": "2030-01-01", "to_date": "2030-02-01"}],
        )

        with pytest.raises(InvalidCompetenceError) as exc_info:
            await application_service.submit_application(applicant.id, bad_form)

        assert exc_info.value.competence_id == 9999
        assert "Invalid competence ID" in exc_info.value.message
        details = await application_service.get_application_details(application.id)
        assert len(details.competences) == 2
        assert details.availabilities[0].from_date == date(2026, 6, 1)

    @pytest.mark.asyncio
    async def test_reversed_dates_rejected_before_any_write(
        self, application_service, applicant, competence_ids
    ):
        """Test that to < from fails and creates nothing."""
        form = ApplicationForm(
            competences=[
                {"competence_id": competence_ids["lotteries"], "years_of_experience": "1"}
            ],
            availabilities=[{"from_date": "2026-09-10", "to_date": "2026-09-01"}],
        )

        with pytest.raises(InvalidDateRangeError) as exc_info:
            await application_service.submit_application(applicant.id, form)

        assert exc_info.value.from_date == date(2026, 9, 10)
        assert exc_info.value.to_date == date(2026, 9, 1)
        assert await application_service.has_application(applicant.id) is False

    @pytest.mark.asyncio
    async def test_unknown_person_is_not_found(
        self, application_service, sample_application_form
    ):
        """Test that submitting for a missing person fails with not-found."""
        with pytest.raises(NotFoundError):
            await application_service.submit_application(4242, sample_application_form)

    @pytest.mark.asyncio
    async def test_store_failure_after_deletes_rolls_back(
        self,
        application_service,
        applicant,
        sample_application_form,
        competence_ids,
        monkeypatch,
    ):
        """Test that a database error mid-submission keeps the previous children."""
        application = await application_service.submit_application(
            applicant.id, sample_application_form
        )

        async def _fail(self, person_id):
            raise OperationalError("SELECT application", {}, Exception("disk I/O error"))

        monkeypatch.setattr(ApplicationRepository, "find_by_person", _fail)
        replacement = ApplicationForm(
            competences=[
                {
                    "competence_id": competence_ids["roller coaster operation"],
                    "years_of_experience": "5",
                }
            ],
            availabilities=[],
        )

        with pytest.raises(OperationalError):
            await application_service.submit_application(applicant.id, replacement)

        monkeypatch.undo()
        details = await application_service.get_application_details(application.id)
        assert sorted(c.competence_name for c in details.competences) == [
            "lotteries",
            "ticket sales",
        ]
        assert [(a.from_date, a.to_date) for a in details.availabilities] == [
            (date(2026, 6, 1), date(2026, 8, 31))
        ]

    @pytest.mark.asyncio
    async def test_concurrent_first_submissions_create_one_application(
        self, application_service, applicant, sample_application_form
    ):
        """Test that racing first submissions end with a single application."""
        first, second = await asyncio.gather(
            application_service.submit_application(applicant.id, sample_application_form),
            application_service.submit_application(applicant.id, sample_application_form),
        )

        assert first.id == second.id
        items = await application_service.list_applications()
        assert [item.id for item in items] == [first.id]
        details = await application_service.get_application_details(first.id)
        assert len(details.competences) == 2
        assert len(details.availabilities) == 1


class TestUpdateStatus:
    """Tests for version-checked status transitions."""

    @pytest.fixture
    def submitted(self, application_service, applicant, sample_application_form):
        async def _submit():
            return await application_service.submit_application(
                applicant.id, sample_application_form
            )

        return _submit

    @pytest.mark.asyncio
    async def test_matching_version_succeeds_and_bumps(
        self, application_service, submitted
    ):
        """Test that a matching expected version writes and increments."""
        application = await submitted()

        updated = await application_service.update_status(
            application.id, ApplicationStatus.ACCEPTED, ExpectedVersion(1)
        )

        assert updated.status == ApplicationStatus.ACCEPTED
        assert updated.version == 2
        assert updated.updated_at >= application.updated_at
        assert updated.created_at == application.created_at

    @pytest.mark.asyncio
    async def test_stale_version_conflicts_without_write(
        self, application_service, submitted
    ):
        """Test that a stale expected version raises a conflict and writes nothing."""
        application = await submitted()

        with pytest.raises(VersionConflictError) as exc_info:
            await application_service.update_status(
                application.id, "REJECTED", ExpectedVersion(7)
            )

        assert exc_info.value.expected == 7
        assert exc_info.value.actual == 1
        current = await application_service.get_application(application.id)
        assert current.status == ApplicationStatus.UNHANDLED
        assert current.version == 1

    @pytest.mark.asyncio
    async def test_unconditional_update_always_writes(
        self, application_service, submitted
    ):
        """Test that skipping the check still increments the version."""
        application = await submitted()

        first = await application_service.update_status(
            application.id, ApplicationStatus.REJECTED, Unconditional()
        )
        second = await application_service.set_status(application.id, "accepted")

        assert first.version == 2
        assert second.version == 3
        assert second.status == ApplicationStatus.ACCEPTED

    @pytest.mark.asyncio
    async def test_any_status_can_follow_any_other(
        self, application_service, submitted
    ):
        """Test that transitions are permissive, e.g. REJECTED back to UNHANDLED."""
        application = await submitted()

        await application_service.set_status(application.id, ApplicationStatus.REJECTED)
        reverted = await application_service.set_status(
            application.id, ApplicationStatus.UNHANDLED
        )

        assert reverted.status == ApplicationStatus.UNHANDLED

    @pytest.mark.asyncio
    async def test_missing_application_is_not_found_not_conflict(
        self, application_service
    ):
        """Test that an unknown id fails with not-found even with a version."""
        with pytest.raises(NotFoundError):
            await application_service.update_status(
                9999, ApplicationStatus.ACCEPTED, ExpectedVersion(1)
            )

    @pytest.mark.asyncio
    async def test_malformed_status_rejected(self, application_service, submitted):
        """Test that an unknown status name is a validation error."""
        application = await submitted()

        with pytest.raises(InvalidStatusError):
            await application_service.update_status(application.id, "PENDING")

        current = await application_service.get_application(application.id)
        assert current.version == 1

    @pytest.mark.asyncio
    async def test_concurrent_updates_one_wins(self, application_service, submitted):
        """Test that two updates against the same version yield one conflict."""
        application = await submitted()

        results = await asyncio.gather(
            application_service.update_status(
                application.id, ApplicationStatus.ACCEPTED, ExpectedVersion(1)
            ),
            application_service.update_status(
                application.id, ApplicationStatus.REJECTED, ExpectedVersion(1)
            ),
            return_exceptions=True,
        )

        successes = [r for r in results if not isinstance(r, Exception)]
        conflicts = [r for r in results if isinstance(r, VersionConflictError)]
        assert len(successes) == 1
        assert len(conflicts) == 1

        current = await application_service.get_application(application.id)
        assert current.version == 2
        assert current.status == successes[0].status

    @pytest.mark.asyncio
    async def test_conflict_then_informed_retry(self, application_service, submitted):
        """Test the reload-and-retry sequence from version 3 to version 5."""
        application = await submitted()
        await application_service.set_status(application.id, ApplicationStatus.UNHANDLED)
        observed = await application_service.set_status(
            application.id, ApplicationStatus.UNHANDLED
        )
        assert observed.version == 3

        request_a = await application_service.update_status(
            application.id, ApplicationStatus.ACCEPTED, ExpectedVersion(3)
        )
        assert request_a.version == 4
        assert request_a.status == ApplicationStatus.ACCEPTED

        with pytest.raises(VersionConflictError):
            await application_service.update_status(
                application.id, ApplicationStatus.REJECTED, ExpectedVersion(3)
            )

        reread = await application_service.get_application_details(application.id)
        assert reread.version == 4
        assert reread.status == ApplicationStatus.ACCEPTED

        request_b = await application_service.update_status(
            application.id, ApplicationStatus.REJECTED, ExpectedVersion(reread.version)
        )
        assert request_b.version == 5
        assert request_b.status == ApplicationStatus.REJECTED


class TestProjections:
    """Tests for recruiter list, page and detail views."""

    @pytest.fixture
    def submit_for(self, application_service, registration_service, registration_form):
        async def _submit(username: str, form: ApplicationForm):
            person = await registration_service.register_applicant(
                registration_form(username, surname=username.title())
            )
            return await application_service.submit_application(person.id, form)

        return _submit

    @pytest.mark.asyncio
    async def test_list_newest_first_with_names(
        self, application_service, submit_for, sample_application_form
    ):
        """Test that the list joins the applicant name and orders newest first."""
        first = await submit_for("alice", sample_application_form)
        second = await submit_for("bob", sample_application_form)

        items = await application_service.list_applications()

        assert [item.id for item in items] == [second.id, first.id]
        assert items[0].person_name == "Ada Bob"
        assert items[0].status == ApplicationStatus.UNHANDLED

    @pytest.mark.asyncio
    async def test_list_filtered_by_status(
        self, application_service, submit_for, sample_application_form
    ):
        """Test filtering the list by status."""
        first = await submit_for("alice", sample_application_form)
        await submit_for("bob", sample_application_form)
        await application_service.set_status(first.id, ApplicationStatus.ACCEPTED)

        accepted = await application_service.list_applications(
            ApplicationStatus.ACCEPTED
        )
        rejected = await application_service.list_applications(
            ApplicationStatus.REJECTED
        )

        assert [item.id for item in accepted] == [first.id]
        assert rejected == []

    @pytest.mark.asyncio
    async def test_pages_and_flags(
        self, application_service, submit_for, sample_application_form
    ):
        """Test page boundaries with a page size of two."""
        for username in ("alice", "bob", "carol"):
            await submit_for(username, sample_application_form)

        first_page = await application_service.list_applications_page(0)
        last_page = await application_service.list_applications_page(1)

        assert len(first_page.content) == 2
        assert first_page.total_elements == 3
        assert first_page.total_pages == 2
        assert first_page.has_next is True
        assert first_page.has_previous is False
        assert len(last_page.content) == 1
        assert last_page.has_next is False
        assert last_page.has_previous is True

    @pytest.mark.asyncio
    async def test_empty_filtered_page(
        self, application_service, submit_for, sample_application_form
    ):
        """Test that no matches yields an empty page with both flags false."""
        await submit_for("alice", sample_application_form)

        page = await application_service.list_applications_page(
            0, ApplicationStatus.REJECTED
        )

        assert page.content == []
        assert page.total_elements == 0
        assert page.has_next is False
        assert page.has_previous is False

    @pytest.mark.asyncio
    async def test_negative_page_rejected(self, application_service):
        """Test that a negative page index is invalid input."""
        with pytest.raises(InvalidInputError):
            await application_service.list_applications_page(-1)

    @pytest.mark.asyncio
    async def test_details_include_person_fields(
        self, application_service, applicant, sample_application_form
    ):
        """Test that details carry email, pnr and current version."""
        application = await application_service.submit_application(
            applicant.id, sample_application_form
        )

        details = await application_service.get_application_details(application.id)

        assert details.person_name == "Ada Lovelace"
        assert details.person_email == "applicant1@example.com"
        assert details.person_pnr == "19851210-1234"
        assert details.version == 1

    @pytest.mark.asyncio
    async def test_details_not_found(self, application_service):
        """Test that details for a missing id raise not-found."""
        with pytest.raises(NotFoundError):
            await application_service.get_application_details(12345)

    @pytest.mark.asyncio
    async def test_lookup_by_person(
        self, application_service, applicant, sample_application_form
    ):
        """Test lookup by owner before and after submission."""
        assert await application_service.get_application_by_person(applicant.id) is None

        application = await application_service.submit_application(
            applicant.id, sample_application_form
        )
        found = await application_service.get_application_by_person(applicant.id)

        assert found.id == application.id

    @pytest.mark.asyncio
    async def test_competence_catalog(self, application_service):
        """Test that the seeded catalog is returned."""
        competences = await application_service.get_all_competences()

        assert [c.name for c in competences] == [
            "ticket sales",
            "lotteries",
            "roller coaster operation",
        ]
