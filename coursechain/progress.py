"""Contract that tracks which modules of a course each user has completed."""

from __future__ import annotations

from enum import IntEnum

from .env import Env


class ProgressErrorCode(IntEnum):
    ALREADY_INITIALIZED = 1
    NOT_INITIALIZED = 2
    UNAUTHORIZED = 3
    COURSE_NOT_FOUND = 4
    INVALID_PROGRESS = 5
    MODULE_ALREADY_COMPLETED = 6
    NON_INCREASING_PROGRESS = 7
    INVALID_PROGRESS_RANGE = 8


_MESSAGES = {
    ProgressErrorCode.ALREADY_INITIALIZED: "contract has already been initialized",
    ProgressErrorCode.NOT_INITIALIZED: "not initialized",
    ProgressErrorCode.UNAUTHORIZED: "caller is not authorized",
    ProgressErrorCode.COURSE_NOT_FOUND: "course not found",
    ProgressErrorCode.INVALID_PROGRESS: "invalid module number",
    ProgressErrorCode.MODULE_ALREADY_COMPLETED: "module is already completed",
    ProgressErrorCode.NON_INCREASING_PROGRESS: "progress can only increase",
    ProgressErrorCode.INVALID_PROGRESS_RANGE: "invalid progress range",
}


class ProgressError(Exception):
    """Error raised by the progress contract, carrying a numeric code."""

    def __init__(self, code: ProgressErrorCode) -> None:
        self.code = ProgressErrorCode(code)
        super().__init__(_MESSAGES[self.code])

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ProgressError):
            return self.code == other.code
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.code)


class ProgressContract:
    """Stores courses with their module counts and per-user module completion.

    Modules are numbered from 1; a user's progress for a course is a list of
    ``total_modules + 1`` flags whose first entry is unused.
    """

    def __init__(self, env: Env | None = None) -> None:
        self.env = env if env is not None else Env()
        self._admin: str | None = None
        self._courses: dict[str, int] = {}
        self._user_progress: dict[str, dict[str, list[bool]]] = {}

    def _get_admin(self) -> str:
        if self._admin is None:
            raise ProgressError(ProgressErrorCode.NOT_INITIALIZED)
        return self._admin

    def initialize(self, admin: str) -> None:
        """Set the admin; fails if the contract is already initialised."""
        if self._admin is not None:
            raise ProgressError(ProgressErrorCode.ALREADY_INITIALIZED)
        self.env.require_auth(admin)
        self._admin = admin

    def add_course(self, course_id: str, total_modules: int) -> None:
        """Register a course, or replace its module count; admin only."""
        self.env.require_auth(self._get_admin())
        self._courses[course_id] = total_modules

    def get_course_modules(self, course_id: str) -> int:
        try:
            return self._courses[course_id]
        except KeyError:
            raise ProgressError(ProgressErrorCode.COURSE_NOT_FOUND) from None

    def update_progress(self, user: str, course_id: str, module: int, completed: bool) -> None:
        """Set the completion flag of one module; progress may only increase."""
        self.env.require_auth(user)
        total_modules = self.get_course_modules(course_id)

        courses = self._user_progress.get(user, {})
        course_progress = list(courses.get(course_id, [False] * (total_modules + 1)))

        if module == 0 or module > total_modules:
            raise ProgressError(ProgressErrorCode.INVALID_PROGRESS)

        current = course_progress[module] if module < len(course_progress) else False
        if current and completed:
            raise ProgressError(ProgressErrorCode.MODULE_ALREADY_COMPLETED)
        if current and not completed:
            raise ProgressError(ProgressErrorCode.NON_INCREASING_PROGRESS)

        course_progress[module] = completed
        updated = dict(courses)
        updated[course_id] = course_progress
        self._user_progress[user] = updated

        flag = "true" if completed else "false"
        self.env.publish(("info", "progress_update"), f"{user},{course_id},{module},{flag}")

    def get_progress(self, user: str, course_id: str) -> list[bool]:
        """Return the user's module flags for a course, index 0 unused."""
        self.get_course_modules(course_id)
        courses = self._user_progress.get(user)
        if courses is None or course_id not in courses:
            raise ProgressError(ProgressErrorCode.NOT_INITIALIZED)
        return list(courses[course_id])

    def get_completion_percentage(self, user: str, course_id: str) -> int:
        """Whole-number percentage of the course's modules the user completed."""
        progress = self.get_progress(user, course_id)
        total = len(progress) - 1
        if total == 0:
            return 0
        completed = sum(1 for flag in progress[1:] if flag)
        return completed * 100 // total