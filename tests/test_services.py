import logging

from careers.domain.services import job_service
from careers.domain.services.auth_service import authenticate


def test_filter_jobs_treats_blank_and_all_as_no_constraint(seeded_store):
    everything = seeded_store.get_all_jobs()

    assert job_service.filter_jobs(seeded_store, department="  ") == everything
    assert job_service.filter_jobs(seeded_store, location="ALL") == everything


def test_filter_jobs_by_type_alias(seeded_store):
    assert job_service.filter_jobs(seeded_store, job_type="contract") == []
    assert len(job_service.filter_jobs(seeded_store, job_type="full-time")) == 8


def test_create_and_delete_are_logged(store, job_fields, caplog):
    with caplog.at_level(logging.INFO, logger="careers.domain.services.job_service"):
        job = job_service.create_job(store, job_fields)
        job_service.delete_job(store, job.id)

    assert f"Created job {job.id}" in caplog.text
    assert f"Deleted job {job.id}" in caplog.text


def test_authenticate(seeded_store, caplog):
    user = authenticate(seeded_store, "admin", "admin123")
    assert user is not None and user.admin

    with caplog.at_level(logging.WARNING):
        assert authenticate(seeded_store, "admin", "wrong") is None
        assert authenticate(seeded_store, "ghost", "admin123") is None
    assert "Failed login" in caplog.text
