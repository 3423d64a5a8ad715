"""
Request handling shared by every CRUD resource.

Parses the path id and the request body, validates creation fields, calls
the repository and reports the outcome as a ServiceResult. Expected
failures never raise; repository errors propagate to the API error handler.
"""

import re
from typing import Any, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.logger import logger
from domain.errors import ServiceResult
from repositories.interfaces import IRepository

RecordT = TypeVar("RecordT")

INVALID_ID_MESSAGE = "Invalid ID"

# Path ids are signed 32-bit integers written in ASCII digits
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
ID_MIN = -(2**31)
ID_MAX = 2**31 - 1


def parse_id(raw_id: Optional[str]) -> Optional[int]:
    """
    Parse a path id.

    Args:
        raw_id: Path segment as received

    Returns:
        The integer id, or None if the segment is not a valid id
    """
    if raw_id is None or not _ID_PATTERN.fullmatch(raw_id):
        return None
    value = int(raw_id)
    if value < ID_MIN or value > ID_MAX:
        return None
    return value


def describe_parse_error(error: PydanticValidationError) -> str:
    """Flatten pydantic errors into one line: ``field: message; ...``."""
    parts = []
    for item in error.errors():
        location = item.get("loc") or ("body",)
        parts.append(f"{location[-1]}: {item.get('msg')}")
    return "Failed to parse request body: " + "; ".join(parts)


class ResourceService(Generic[RecordT]):
    """
    Generic service over one repository.

    Subclasses name the resource and provide the request schemas and the
    ordered list of required string fields checked on create.
    """

    resource_label: str = "Resource"
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    # (field name, message) pairs, checked in order
    required_fields: Sequence[Tuple[str, str]] = ()

    def __init__(self, repository: IRepository):
        self.repository = repository
        logger.debug(f"{type(self).__name__} initialized with {type(repository).__name__}")

    @property
    def not_found_message(self) -> str:
        return f"{self.resource_label} not found"

    def _parse_body(self, schema: Type[BaseModel], payload: Any):
        try:
            return schema.model_validate(payload), None
        except PydanticValidationError as e:
            message = describe_parse_error(e)
            logger.warning(f"Malformed {self.resource_label.lower()} body: {message}")
            return None, message

    def _blank_field_message(self, request: BaseModel) -> Optional[str]:
        for field_name, message in self.required_fields:
            value = getattr(request, field_name)
            if not value or not value.strip():
                return message
        return None

    async def list_all(self) -> ServiceResult[List[RecordT]]:
        records = await self.repository.list()
        logger.debug(f"Listed {len(records)} {self.resource_label.lower()}(s)")
        return ServiceResult.ok(records)

    async def get(self, raw_id: str) -> ServiceResult[RecordT]:
        record_id = parse_id(raw_id)
        if record_id is None:
            return ServiceResult.invalid(INVALID_ID_MESSAGE)

        record = await self.repository.get(record_id)
        if record is None:
            logger.warning(f"{self.resource_label} not found: id={record_id}")
            return ServiceResult.not_found(self.not_found_message)
        return ServiceResult.ok(record)

    async def create(self, payload: Any) -> ServiceResult[RecordT]:
        request, parse_error = self._parse_body(self.create_schema, payload)
        if parse_error is not None:
            return ServiceResult.malformed(parse_error)

        blank_message = self._blank_field_message(request)
        if blank_message is not None:
            logger.warning(f"Rejected {self.resource_label.lower()} create: {blank_message}")
            return ServiceResult.invalid(blank_message)

        record = await self.repository.create(request.to_domain())
        logger.info(f"{self.resource_label} created: id={record.id}")
        return ServiceResult.ok(record)

    async def update(self, raw_id: str, payload: Any) -> ServiceResult[RecordT]:
        record_id = parse_id(raw_id)
        if record_id is None:
            return ServiceResult.invalid(INVALID_ID_MESSAGE)

        request, parse_error = self._parse_body(self.update_schema, payload)
        if parse_error is not None:
            return ServiceResult.malformed(parse_error)

        # No blank-field check here: updates accept any string
        record = await self.repository.update(record_id, request.to_domain())
        if record is None:
            logger.warning(f"{self.resource_label} not found for update: id={record_id}")
            return ServiceResult.not_found(self.not_found_message)

        logger.info(f"{self.resource_label} updated: id={record_id}")
        return ServiceResult.ok(record)

    async def delete(self, raw_id: str) -> ServiceResult[None]:
        record_id = parse_id(raw_id)
        if record_id is None:
            return ServiceResult.invalid(INVALID_ID_MESSAGE)

        if not await self.repository.delete(record_id):
            logger.warning(f"{self.resource_label} not found for delete: id={record_id}")
            return ServiceResult.not_found(self.not_found_message)

        logger.info(f"{self.resource_label} deleted: id={record_id}")
        return ServiceResult.ok()
