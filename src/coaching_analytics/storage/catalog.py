"""Course catalog loaded from a YAML document."""

from pathlib import Path

import structlog
import yaml

from coaching_analytics.models.course import Course

logger = structlog.get_logger()


class YamlCourseCatalog:
    """Reads ``courses:`` from a YAML file on every lookup.

    The file is re-read each time so edits to the catalog (added or deleted
    lessons) are reflected in the next progress computation.
    """

    def __init__(self, catalog_path: Path):
        self.catalog_path = catalog_path

    def _load(self) -> list[Course]:
        if not self.catalog_path.exists():
            raise FileNotFoundError(f"Course catalog not found: {self.catalog_path}")
        with open(self.catalog_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return [Course(**course) for course in data.get("courses", [])]

    def get_course(self, course_id: str) -> Course | None:
        for course in self._load():
            if course.id == course_id:
                return course
        logger.debug("course_missing", course_id=course_id)
        return None
