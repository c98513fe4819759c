import math

import pytest

from coursechain.courses import Course, CourseRegistry, Module, ModuleStatus, main

NAME = "Rust Programming Basics"


def make_course(*statuses):
    modules = [Module(i, f"Module {i}", status) for i, status in enumerate(statuses, 1)]
    return Course(id=101, name=NAME, modules=modules)


def test_progress_all_completed_is_hundred():
    course = make_course(ModuleStatus.COMPLETED, ModuleStatus.COMPLETED)
    assert course.calculate_progress() == 100.0


def test_progress_none_completed_is_zero():
    course = make_course(ModuleStatus.NOT_STARTED, ModuleStatus.IN_PROGRESS)
    assert course.calculate_progress() == 0.0


def test_progress_partial():
    course = make_course(ModuleStatus.COMPLETED, ModuleStatus.COMPLETED, ModuleStatus.NOT_STARTED)
    assert course.calculate_progress() == pytest.approx(200 / 3)


def test_progress_empty_course_is_nan():
    progress = Course(id=1, name="Empty").calculate_progress()
    assert str(progress) == "nan"
    assert math.isnan(progress)


def test_in_progress_does_not_count():
    course = make_course(ModuleStatus.IN_PROGRESS)
    assert course.mark_course_completed() is False
    assert course.completed is False


def test_mark_incomplete_prints_message(capsys):
    course = make_course(ModuleStatus.COMPLETED, ModuleStatus.NOT_STARTED)
    assert course.mark_course_completed() is False
    assert course.completed is False
    out = capsys.readouterr().out
    assert out == f"Cannot mark '{NAME}' as completed. Some modules are still incomplete.\n"


def test_mark_complete_issues_certificate_and_event(capsys):
    course = make_course(ModuleStatus.COMPLETED)
    assert course.mark_course_completed() is True
    assert course.completed is True
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        f"Course '{NAME}' is marked as completed.",
        f"Certificate issued for course '{NAME}'. Congratulations!",
        f"Event: Course '{NAME}' completed successfully. Emitting course completion event.",
    ]


def test_registry_missing_course(capsys):
    registry = CourseRegistry()
    assert registry.mark_course_completed_by_id(7) is False
    assert capsys.readouterr().out == "Course with ID 7 not found.\n"


def test_registry_create_replaces_same_id():
    registry = CourseRegistry()
    registry.create_course(make_course(ModuleStatus.NOT_STARTED))
    replacement = Course(id=101, name="Other")
    registry.create_course(replacement)
    assert registry.courses == {101: replacement}


def test_registry_completion_flow():
    registry = CourseRegistry()
    registry.create_course(make_course(ModuleStatus.COMPLETED, ModuleStatus.NOT_STARTED))
    assert registry.mark_course_completed_by_id(101) is False
    registry.courses[101].modules[1].status = ModuleStatus.COMPLETED
    assert registry.mark_course_completed_by_id(101) is True
    assert registry.courses[101].completed is True


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        f"Cannot mark '{NAME}' as completed. Some modules are still incomplete.",
        f"Course '{NAME}' is marked as completed.",
        f"Certificate issued for course '{NAME}'. Congratulations!",
        f"Event: Course '{NAME}' completed successfully. Emitting course completion event.",
    ]