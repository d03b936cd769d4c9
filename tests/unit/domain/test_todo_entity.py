"""
Unit tests for the Todo entity.
"""

import pytest

from record_sync.domain.exceptions import ValidationError
from record_sync.domain.todo.entities import Todo


class TestTodoValidation:
    """Tests for Todo construction invariants."""

    def test_valid_todo_exposes_values(self):
        """Test a valid todo exposes the values passed in"""
        todo = Todo(user_id=3, id=42, title="water plants", completed=True)

        assert todo.user_id == 3
        assert todo.id == 42
        assert todo.title == "water plants"
        assert todo.completed is True

    @pytest.mark.parametrize(
        "user_id,todo_id,title,field",
        [
            (0, 1, "t", "userId"),
            (1, 0, "t", "id"),
            (1, 1, "", "title"),
            (0, 0, "", "userId"),
        ],
    )
    def test_zero_ids_or_empty_title_fail(self, user_id, todo_id, title, field):
        """Test zero ids or an empty title fail with the field named"""
        with pytest.raises(ValidationError) as exc_info:
            Todo(user_id=user_id, id=todo_id, title=title, completed=False)

        assert exc_info.value.field == field

    def test_negative_ids_are_accepted(self):
        """Test only zero ids are rejected"""
        todo = Todo(user_id=-1, id=-5, title="t", completed=False)
        assert todo.user_id == -1
        assert todo.id == -5

    def test_validation_error_is_value_error(self):
        """Test ValidationError can be caught as ValueError"""
        with pytest.raises(ValueError, match="title can not be empty"):
            Todo(user_id=1, id=1, title="", completed=False)

    def test_none_fields_fail(self):
        """Test None ids fail validation"""
        with pytest.raises(ValidationError) as exc_info:
            Todo(user_id=1, id=None, title="t", completed=False)
        assert exc_info.value.field == "id"

    def test_bool_is_not_an_id(self):
        """Test booleans are rejected as ids"""
        with pytest.raises(ValidationError):
            Todo(user_id=True, id=1, title="t", completed=False)

    def test_completed_must_be_bool(self):
        """Test completed must be a boolean"""
        with pytest.raises(ValidationError) as exc_info:
            Todo(user_id=1, id=1, title="t", completed="yes")
        assert exc_info.value.field == "completed"

    def test_todo_is_immutable(self):
        """Test fields cannot be reassigned"""
        todo = Todo(user_id=1, id=1, title="t", completed=False)
        with pytest.raises(AttributeError):
            todo.title = "changed"


class TestTodoWireShape:
    """Tests for conversion to and from the API JSON shape."""

    def test_from_dict(self):
        """Test construction from the API wire shape"""
        todo = Todo.from_dict(
            {"userId": 1, "id": 2, "title": "delectus aut autem", "completed": False}
        )

        assert todo == Todo(user_id=1, id=2, title="delectus aut autem", completed=False)

    def test_from_dict_missing_title_reports_field(self):
        """Test a missing title key is reported as the title field"""
        with pytest.raises(ValidationError) as exc_info:
            Todo.from_dict({"userId": 1, "id": 2, "completed": False})
        assert exc_info.value.field == "title"

    def test_to_dict_uses_api_keys(self):
        """Test to_dict produces the API wire shape"""
        todo = Todo(user_id=5, id=6, title="x", completed=True)

        assert todo.to_dict() == {"userId": 5, "id": 6, "title": "x", "completed": True}
