"""Certificate descriptor handed to the document renderer."""

from datetime import datetime

from pydantic import BaseModel, Field

from coaching_analytics.models.progress import utc_now


class Certificate(BaseModel):
    id: str
    student_name: str
    course_title: str
    completion_date: datetime = Field(default_factory=utc_now)
    organization: str
