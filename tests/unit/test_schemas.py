"""
Unit tests for request/response schemas.
"""

import uuid
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from app.schemas.file import FileUpload, TodoFileResponse
from app.schemas.todo import TodoCreate, TodoResponse, TodoUpdate


class TestTodoUpdate:
    """Unset and explicitly set fields must stay distinguishable."""

    def test_omitted_fields_are_unset(self):
        update = TodoUpdate.model_validate({"completed": True})

        assert update.model_dump(exclude_unset=True) == {"completed": True}

    def test_empty_tags_are_set(self):
        update = TodoUpdate.model_validate({"tags": []})

        assert update.model_dump(exclude_unset=True) == {"tags": []}

    def test_null_description_is_set(self):
        update = TodoUpdate.model_validate({"description": None})

        assert update.model_dump(exclude_unset=True) == {"description": None}

    def test_long_tag_rejected(self):
        with pytest.raises(ValidationError):
            TodoUpdate.model_validate({"tags": ["ok", "t" * 101]})

    @pytest.mark.parametrize("field", ["title", "completed", "tags"])
    def test_null_rejected_for_non_nullable_fields(self, field):
        with pytest.raises(ValidationError):
            TodoUpdate.model_validate({field: None})


class TestTodoCreate:
    def test_tags_default_to_empty(self):
        assert TodoCreate(title="x").tags == []

    def test_title_required(self):
        with pytest.raises(ValidationError):
            TodoCreate.model_validate({"description": "no title"})

    def test_null_tags_mean_no_tags(self):
        assert TodoCreate.model_validate({"title": "x", "tags": None}).tags == []

    def test_tag_length_checked_after_trim(self):
        padded = "  " + "t" * 100 + "  "

        assert TodoCreate(title="x", tags=[padded]).tags == ["t" * 100]
        with pytest.raises(ValidationError):
            TodoCreate(title="x", tags=["t" * 101])

    def test_long_padded_title_left_to_the_service(self):
        title = "  " + "x" * 499

        assert TodoCreate(title=title).title == title


class TestFileUpload:
    def test_accepts_camel_case_todo_id(self):
        todo_id = uuid.uuid4()

        upload = FileUpload.model_validate(
            {"todoId": str(todo_id), "file": "data:a/b;base64,AA==", "filename": "a.b"}
        )

        assert upload.todo_id == str(todo_id)
        assert upload.mimetype is None

    @pytest.mark.parametrize("missing", ["todoId", "file", "filename"])
    def test_required_fields(self, missing):
        payload = {"todoId": str(uuid.uuid4()), "file": "data:a/b;base64,AA==", "filename": "a.b"}
        payload.pop(missing)

        with pytest.raises(ValidationError):
            FileUpload.model_validate(payload)


class TestResponses:
    def test_todo_response_serializes_camel_case(self):
        now = datetime.now(timezone.utc)
        todo_id = uuid.uuid4()
        stored = SimpleNamespace(
            id=uuid.uuid4(),
            todo_id=todo_id,
            filename="photo.png",
            mimetype="image/png",
            size=3,
            stored_name="abc.png",
            created_at=now,
            updated_at=now,
        )
        todo = SimpleNamespace(
            id=todo_id,
            title="t",
            description=None,
            completed=False,
            created_at=now,
            updated_at=now,
            files=[stored],
            tags=[SimpleNamespace(id=uuid.uuid4(), name="x", created_at=now, updated_at=now)],
        )

        data = TodoResponse.model_validate(todo).model_dump(by_alias=True, mode="json")

        assert set(data) == {
            "id", "title", "description", "completed", "createdAt", "updatedAt", "files", "tags"
        }
        assert data["files"][0]["url"] == "/uploads/abc.png"
        assert data["files"][0]["todoId"] == str(todo_id)
        assert "storedName" not in data["files"][0]
        assert set(data["tags"][0]) == {"id", "name", "createdAt", "updatedAt"}

    def test_todo_file_response_url(self):
        now = datetime.now(timezone.utc)
        response = TodoFileResponse(
            id=uuid.uuid4(),
            todo_id=uuid.uuid4(),
            filename="a.txt",
            mimetype="text/plain",
            size=1,
            stored_name="f00.txt",
            created_at=now,
            updated_at=now,
        )

        assert response.url == "/uploads/f00.txt"

    def test_naive_timestamps_serialize_as_utc(self):
        naive = datetime(2026, 1, 2, 3, 4, 5)
        response = TodoFileResponse(
            id=uuid.uuid4(),
            todo_id=uuid.uuid4(),
            filename="a.txt",
            mimetype="text/plain",
            size=1,
            stored_name="f00.txt",
            created_at=naive,
            updated_at=naive,
        )

        data = response.model_dump(by_alias=True, mode="json")

        created = datetime.fromisoformat(data["createdAt"])
        assert created.utcoffset() is not None
        assert created == naive.replace(tzinfo=timezone.utc)
