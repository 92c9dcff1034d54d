"""Tests for selection bookkeeping."""

import random

from s_todo.models import Project, Todo
from s_todo.selection import NEXT, PREVIOUS, SelectionModel, reindex_after_delete


def assert_invariants(projects, sel):
    if not projects:
        assert sel.selected_project is None
    else:
        assert sel.selected_project is not None
        assert 0 <= sel.selected_project < len(projects)
    todos = projects[sel.selected_project].todos if sel.selected_project is not None else []
    if not todos:
        assert sel.selected_todo is None
    else:
        assert sel.selected_todo is not None
        assert 0 <= sel.selected_todo < len(todos)


class TestReindexAfterDelete:
    def test_empty_list_clears(self):
        assert reindex_after_delete(0, 0) is None

    def test_tail_delete_moves_up(self):
        assert reindex_after_delete(2, 2) == 1

    def test_middle_delete_keeps_position(self):
        assert reindex_after_delete(1, 3) == 1

    def test_head_delete_keeps_position(self):
        assert reindex_after_delete(0, 1) == 0


class TestInitialSelection:
    def test_first_project_and_todo(self, sample_data):
        sel = SelectionModel(sample_data.projects)
        assert sel.selected_project == 0
        assert sel.selected_todo == 0
        assert sel.current_todo().title == "Report"

    def test_empty_projects(self):
        sel = SelectionModel([])
        assert sel.selected_project is None
        assert sel.selected_todo is None
        assert sel.current_project() is None
        assert sel.current_todos() == []

    def test_first_project_without_todos(self):
        sel = SelectionModel([Project("Empty")])
        assert sel.selected_project == 0
        assert sel.selected_todo is None


class TestMoveProject:
    def test_next_and_wrap(self, sample_data):
        sel = SelectionModel(sample_data.projects)
        sel.move_project(NEXT)
        assert sel.selected_project == 1
        sel.move_project(NEXT)
        sel.move_project(NEXT)
        assert sel.selected_project == 0

    def test_previous_wraps_to_last(self, sample_data):
        sel = SelectionModel(sample_data.projects)
        sel.move_project(PREVIOUS)
        assert sel.selected_project == 2

    def test_resets_todo_selection(self, sample_data):
        sel = SelectionModel(sample_data.projects)
        sel.move_todo(NEXT)
        assert sel.selected_todo == 1
        sel.move_project(NEXT)
        assert sel.selected_todo == 0
        sel.move_project(NEXT)  # "Empty"
        assert sel.selected_todo is None

    def test_noop_without_projects(self):
        sel = SelectionModel([])
        sel.move_project(NEXT)
        assert sel.selected_project is None


class TestMoveTodo:
    def test_wraps_both_ways(self, sample_data):
        sel = SelectionModel(sample_data.projects)
        sel.move_todo(PREVIOUS)
        assert sel.selected_todo == 1
        sel.move_todo(NEXT)
        assert sel.selected_todo == 0

    def test_noop_without_todos(self):
        sel = SelectionModel([Project("Empty")])
        sel.move_todo(NEXT)
        assert sel.selected_todo is None


class TestDirectSelection:
    def test_out_of_range_ignored(self, sample_data):
        sel = SelectionModel(sample_data.projects)
        sel.select_project(10)
        assert sel.selected_project == 0
        sel.select_todo(5)
        assert sel.selected_todo == 0

    def test_clear(self, sample_data):
        sel = SelectionModel(sample_data.projects)
        sel.select_todo(None)
        assert sel.current_todo() is None
        sel.ensure_todo_selected()
        assert sel.selected_todo == 0


class TestStructuralChanges:
    def test_delete_last_todo_clears(self):
        projects = [Project("P", [Todo("only")])]
        sel = SelectionModel(projects)
        projects[0].todos.pop(0)
        sel.todo_deleted(0)
        assert sel.selected_todo is None

    def test_delete_middle_selects_next_item(self):
        projects = [Project("P", [Todo("a"), Todo("b"), Todo("c")])]
        sel = SelectionModel(projects)
        sel.select_todo(1)
        projects[0].todos.pop(1)
        sel.todo_deleted(1)
        assert sel.selected_todo == 1
        assert sel.current_todo().title == "c"

    def test_delete_project_resets_todo(self, sample_data):
        projects = sample_data.projects
        sel = SelectionModel(projects)
        sel.move_project(PREVIOUS)  # "Empty" (index 2)
        projects.pop(2)
        sel.project_deleted(2)
        assert sel.selected_project == 1
        assert sel.selected_todo == 0

    def test_project_added_selects_it(self, sample_data):
        projects = sample_data.projects
        sel = SelectionModel(projects)
        projects.append(Project("New"))
        sel.project_added()
        assert sel.selected_project == 3
        assert sel.selected_todo is None

    def test_random_edits_keep_invariants(self):
        rng = random.Random(1234)
        projects: list[Project] = []
        sel = SelectionModel(projects)
        for step in range(500):
            op = rng.choice(["add_p", "add_t", "del_p", "del_t", "move_p", "move_t"])
            if op == "add_p":
                projects.append(Project(f"p{step}"))
                sel.project_added()
            elif op == "add_t" and sel.current_project() is not None:
                sel.current_project().todos.append(Todo(f"t{step}"))
                sel.todo_added()
            elif op == "del_p" and sel.selected_project is not None:
                idx = sel.selected_project
                projects.pop(idx)
                sel.project_deleted(idx)
            elif op == "del_t" and sel.selected_todo is not None:
                idx = sel.selected_todo
                sel.current_todos().pop(idx)
                sel.todo_deleted(idx)
            elif op == "move_p":
                sel.move_project(rng.choice([NEXT, PREVIOUS]))
            elif op == "move_t":
                sel.move_todo(rng.choice([NEXT, PREVIOUS]))
            assert_invariants(projects, sel)
