"""In-memory course registry that tracks module status and course completion."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum


class ModuleStatus(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass
class Module:
    id: int
    name: str
    status: ModuleStatus = ModuleStatus.NOT_STARTED


@dataclass
class Course:
    """A course made of modules; it may be marked completed once all are done."""

    id: int
    name: str
    modules: list[Module] = field(default_factory=list)
    completed: bool = False

    def calculate_progress(self) -> float:
        """Percentage of modules completed; NaN for a course with no modules."""
        if not self.modules:
            return math.nan
        done = sum(1 for module in self.modules if module.status is ModuleStatus.COMPLETED)
        return done / len(self.modules) * 100.0

    def mark_course_completed(self) -> bool:
        """Mark the course completed if every module is; return whether it was."""
        if all(module.status is ModuleStatus.COMPLETED for module in self.modules):
            self.completed = True
            print(f"Course '{self.name}' is marked as completed.")
            self.issue_certificate()
            self.emit_course_completion_event()
            return True
        print(f"Cannot mark '{self.name}' as completed. Some modules are still incomplete.")
        return False

    def issue_certificate(self) -> None:
        print(f"Certificate issued for course '{self.name}'. Congratulations!")

    def emit_course_completion_event(self) -> None:
        print(
            f"Event: Course '{self.name}' completed successfully. "
            "Emitting course completion event."
        )


@dataclass
class CourseRegistry:
    """Collection of courses keyed by their id."""

    courses: dict[int, Course] = field(default_factory=dict)

    def create_course(self, course: Course) -> None:
        """Add a course, replacing any course with the same id."""
        self.courses[course.id] = course

    def mark_course_completed_by_id(self, course_id: int) -> bool:
        """Try to complete the course with this id; return whether it was completed."""
        course = self.courses.get(course_id)
        if course is None:
            print(f"Course with ID {course_id} not found.")
            return False
        return course.mark_course_completed()


def main(argv: list[str] | None = None) -> int:
    """Run a short demonstration of completing a course."""
    registry = CourseRegistry()
    registry.create_course(
        Course(
            id=101,
            name="Rust Programming Basics",
            modules=[
                Module(1, "Module 1", ModuleStatus.COMPLETED),
                Module(2, "Module 2", ModuleStatus.COMPLETED),
                Module(3, "Module 3", ModuleStatus.NOT_STARTED),
            ],
        )
    )
    registry.mark_course_completed_by_id(101)
    registry.courses[101].modules[2].status = ModuleStatus.COMPLETED
    registry.mark_course_completed_by_id(101)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())