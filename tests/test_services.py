import pytest
from unittest.mock import AsyncMock

from domain.entities import Task, TaskCreate, TaskUpdate, User, UserCreate
from domain.errors import ErrorKind
from domain.value_objects import UNSET
from services import TaskService, UserService, parse_id


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", 1),
        ("0", 0),
        ("-5", -5),
        ("+7", 7),
        ("007", 7),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_parse_id_accepts_signed_32_bit(raw, expected):
    assert parse_id(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["", "abc", "1.5", " 1", "1 ", "0x10", "2147483648", "-2147483649", "١٢", None],
)
def test_parse_id_rejects_invalid(raw):
    assert parse_id(raw) is None


@pytest.fixture
def mock_task_repository():
    repository = AsyncMock()
    repository.list.return_value = []
    return repository


@pytest.fixture
def mock_user_repository():
    return AsyncMock()


async def test_get_invalid_id_skips_repository(mock_task_repository):
    service = TaskService(mock_task_repository)

    result = await service.get("abc")

    assert result.error.kind == ErrorKind.VALIDATION
    assert result.error.message == "Invalid ID"
    mock_task_repository.get.assert_not_called()


async def test_get_missing_task(mock_task_repository):
    mock_task_repository.get.return_value = None
    service = TaskService(mock_task_repository)

    result = await service.get("3")

    assert result.error.kind == ErrorKind.NOT_FOUND
    assert result.error.message == "Task not found"
    mock_task_repository.get.assert_awaited_once_with(3)


async def test_create_task_passes_creation_shape(mock_task_repository):
    mock_task_repository.create.return_value = Task(id=1, title="Write", description="")
    service = TaskService(mock_task_repository)

    result = await service.create({"title": "Write"})

    assert result.is_ok
    assert result.value.id == 1
    mock_task_repository.create.assert_awaited_once_with(
        TaskCreate(title="Write", description="")
    )


@pytest.mark.parametrize("title", ["", "   ", "\t\n"])
async def test_create_task_rejects_blank_title(mock_task_repository, title):
    service = TaskService(mock_task_repository)

    result = await service.create({"title": title})

    assert result.error.kind == ErrorKind.VALIDATION
    assert result.error.message == "Title is required"
    mock_task_repository.create.assert_not_called()


async def test_create_task_without_title_is_malformed(mock_task_repository):
    service = TaskService(mock_task_repository)

    result = await service.create({"description": "no title"})

    assert result.error.kind == ErrorKind.MALFORMED_INPUT


@pytest.mark.parametrize("payload", [None, [], "text", {"title": 5}])
async def test_create_task_malformed_body(mock_task_repository, payload):
    service = TaskService(mock_task_repository)

    result = await service.create(payload)

    assert result.error.kind == ErrorKind.MALFORMED_INPUT
    assert result.error.message.startswith("Failed to parse request body")
    mock_task_repository.create.assert_not_called()


async def test_create_user_checks_name_before_email(mock_user_repository):
    service = UserService(mock_user_repository)

    result = await service.create({"name": "", "email": ""})

    assert result.error.message == "Name is required"


async def test_create_user_blank_email(mock_user_repository):
    service = UserService(mock_user_repository)

    result = await service.create({"name": "Ada", "email": "  "})

    assert result.error.kind == ErrorKind.VALIDATION
    assert result.error.message == "Email is required"


async def test_create_user_passes_creation_shape(mock_user_repository):
    mock_user_repository.create.return_value = User(id=1, name="Ada", email="a@x.io")
    service = UserService(mock_user_repository)

    result = await service.create({"name": "Ada", "email": "a@x.io"})

    assert result.is_ok
    mock_user_repository.create.assert_awaited_once_with(
        UserCreate(name="Ada", email="a@x.io")
    )


async def test_update_checks_id_before_body(mock_task_repository):
    service = TaskService(mock_task_repository)

    result = await service.update("nope", "not an object")

    assert result.error.kind == ErrorKind.VALIDATION
    assert result.error.message == "Invalid ID"


async def test_update_null_fields_are_absent(mock_task_repository):
    mock_task_repository.update.return_value = Task(id=2, title="t")
    service = TaskService(mock_task_repository)

    await service.update("2", {"title": None, "completed": True})

    record_id, changes = mock_task_repository.update.await_args.args
    assert record_id == 2
    assert changes == TaskUpdate(completed=True)
    assert changes.title is UNSET


async def test_update_allows_blank_title(mock_task_repository):
    mock_task_repository.update.return_value = Task(id=1, title="")
    service = TaskService(mock_task_repository)

    result = await service.update("1", {"title": ""})

    assert result.is_ok
    assert result.value.title == ""


async def test_update_missing_task(mock_task_repository):
    mock_task_repository.update.return_value = None
    service = TaskService(mock_task_repository)

    result = await service.update("9", {})

    assert result.error.kind == ErrorKind.NOT_FOUND


async def test_delete_outcomes(mock_user_repository):
    service = UserService(mock_user_repository)

    mock_user_repository.delete.return_value = True
    assert (await service.delete("1")).is_ok

    mock_user_repository.delete.return_value = False
    missing = await service.delete("1")
    assert missing.error.message == "User not found"


async def test_repository_errors_propagate(mock_task_repository):
    mock_task_repository.list.side_effect = RuntimeError("disk on fire")
    service = TaskService(mock_task_repository)

    with pytest.raises(RuntimeError, match="disk on fire"):
        await service.list_all()


@pytest.mark.parametrize("payload", [{"completed": "yes"}, {"completed": 0}, {"title": 1}])
async def test_update_task_wrong_types_are_malformed(mock_task_repository, payload):
    service = TaskService(mock_task_repository)

    result = await service.update("1", payload)

    assert result.error.kind == ErrorKind.MALFORMED_INPUT
    mock_task_repository.update.assert_not_called()
