"""Tests for the dirty-state evaluator."""

from __future__ import annotations

from studio.domains.history import Snapshot
from studio.domains.projects.schemas import Project
from studio.domains.vcs.dirty import deep_equal, is_dirty, normalize


class TestIsDirty:
    """Test the dirty-state rule."""

    def test_no_head_with_working_is_dirty(self) -> None:
        assert is_dirty({"name": "P"}, None) is True

    def test_no_head_without_working_is_clean(self) -> None:
        assert is_dirty(None, None) is False

    def test_no_working_is_clean(self) -> None:
        assert is_dirty(None, {"name": "P"}) is False

    def test_equal_snapshots_are_clean(self) -> None:
        assert is_dirty({"name": "P", "layout": []}, {"layout": [], "name": "P"}) is False

    def test_changed_nested_field_is_dirty(self) -> None:
        head = {"layout": [{"type": "container", "children": [{"type": "text", "content": "a"}]}]}
        working = {"layout": [{"type": "container", "children": [{"type": "text", "content": "b"}]}]}

        assert is_dirty(working, head) is True

    def test_model_compares_against_serialized_head(self) -> None:
        project = Project(name="P", layout=[{"type": "button"}])

        assert is_dirty(project, project.model_dump(mode="json")) is False
        assert is_dirty(project.model_copy(update={"name": "V2"}), project.model_dump(mode="json")) is True

    def test_custom_predicate_is_used(self) -> None:
        def same_name(left, right) -> bool:
            return normalize(left)["name"] == normalize(right)["name"]

        working = {"name": "P", "settings": {"theme": "dark"}}
        head = {"name": "P", "settings": {"theme": "light"}}

        assert is_dirty(working, head) is True
        assert is_dirty(working, head, same_name) is False


class TestDeepEqual:
    """Test structural equality."""

    def test_not_identity_based(self) -> None:
        assert deep_equal({"a": [1, 2]}, {"a": [1, 2]})

    def test_tuple_and_list_are_equal(self) -> None:
        assert deep_equal({"a": (1, 2)}, {"a": [1, 2]})

    def test_list_order_matters(self) -> None:
        assert not deep_equal([1, 2], [2, 1])

    def test_extra_key_is_a_difference(self) -> None:
        assert not deep_equal({"name": "P"}, {"name": "P", "description": None})

    def test_snapshot_compares_against_serialized_head(self) -> None:
        """Verify objects exposing to_dict are compared by their data."""
        snapshot = Snapshot([{"id": "btn", "type": "button"}], "btn", 5.0, "Add button")

        assert deep_equal(snapshot, snapshot.to_dict())
        assert is_dirty(snapshot, snapshot.to_dict()) is False
        assert is_dirty(Snapshot([], None, 5.0, "Add button"), snapshot.to_dict()) is True
