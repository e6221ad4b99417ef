"""Tests for certificate eligibility."""

import pytest
from conftest import make_course

from coaching_analytics.certificates.eligibility import build_certificate, is_eligible
from coaching_analytics.errors import NotEligible, NotFound
from coaching_analytics.models.progress import CourseProgress
from coaching_analytics.models.user import User

ALL_LESSONS = ["l1", "l2", "l3", "quiz"]


class TestIsEligible:
    def test_no_entry(self):
        assert is_eligible(None, make_course()) is False

    def test_all_lessons_done(self):
        entry = CourseProgress(course_id="c1", completed_lesson_ids=ALL_LESSONS)
        assert is_eligible(entry, make_course()) is True

    def test_partial(self):
        entry = CourseProgress(course_id="c1", completed_lesson_ids=["l1", "l2", "l3"])
        assert is_eligible(entry, make_course()) is False

    def test_stale_ids_do_not_count(self):
        entry = CourseProgress(
            course_id="c1", completed_lesson_ids=["l1", "l2", "l3", "deleted"]
        )
        assert is_eligible(entry, make_course()) is False

    def test_monotone(self):
        course = make_course()
        entry = CourseProgress(course_id="c1")
        previous = is_eligible(entry, course)
        for lesson_id in ["deleted", *ALL_LESSONS]:
            entry.add_lesson(lesson_id)
            current = is_eligible(entry, course)
            assert not (previous and not current)
            previous = current
        assert previous is True

    def test_empty_course(self):
        course = make_course(lesson_count=0)
        course.modules = []
        assert is_eligible(CourseProgress(course_id=course.id), course) is True


def test_build_certificate():
    user = User(id="u1", name="Alice Martin")
    certificate = build_certificate(user, make_course(), "CoachyLearning")
    assert certificate.id == "cert-u1-c1"
    assert certificate.student_name == "Alice Martin"
    assert certificate.course_title == "Leadership Essentials"
    assert certificate.organization == "CoachyLearning"


class TestEngineCertificates:
    def test_not_started(self, engine):
        assert engine.check_certificate_eligibility("u1", "c1") is False
        with pytest.raises(NotEligible):
            engine.issue_certificate("u1", "c1")

    def test_completed_course(self, engine):
        for lesson_id in ALL_LESSONS:
            engine.mark_lesson_complete("u1", "c1", lesson_id, True)
        assert engine.check_certificate_eligibility("u1", "c1") is True
        certificate = engine.issue_certificate("u1", "c1")
        assert certificate.id == "cert-u1-c1"

    def test_unknown_course(self, engine):
        with pytest.raises(NotFound):
            engine.check_certificate_eligibility("u1", "missing")
