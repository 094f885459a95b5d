"""
Pydantic integration for uuid_utils.UUID (UUIDv7 identifiers)

uuid_utils.UUID has no pydantic schema of its own. UtilsUUID7 adds one so
booking and message ids can be used directly in request/response models:

    class BookingResponse(BaseModel):
        id: UtilsUUID7

- JSON mode accepts a string only (JSON has no UUID type)
- Python mode also accepts uuid_utils.UUID and stdlib uuid.UUID (asyncpg rows)
- Serialization is always the canonical string
- OpenAPI shows `type: string, format: uuid`
"""

from typing import Any
import uuid

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from uuid_utils import UUID


def to_utils_uuid(value: Any) -> UUID:
    if isinstance(value, UUID):
        return value
    if isinstance(value, uuid.UUID | str):
        try:
            return UUID(str(value))
        except ValueError as e:
            raise ValueError(f'Invalid UUID: {value}') from e
    raise ValueError(f'Invalid UUID: {value!r}')


class UtilsUUID7(UUID):
    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # Must stay convertible to JSON schema for OpenAPI, so no plain-validator-only schema
        return core_schema.json_or_python_schema(
            json_schema=core_schema.chain_schema(
                [
                    core_schema.str_schema(),
                    core_schema.no_info_plain_validator_function(to_utils_uuid),
                ]
            ),
            python_schema=core_schema.union_schema(
                [
                    core_schema.is_instance_schema(UUID),
                    core_schema.chain_schema(
                        [
                            core_schema.union_schema(
                                [
                                    core_schema.is_instance_schema(uuid.UUID),
                                    core_schema.str_schema(),
                                ]
                            ),
                            core_schema.no_info_plain_validator_function(to_utils_uuid),
                        ]
                    ),
                ]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str,
                when_used='always',
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        # handler(schema) would expand the validator chain; OpenAPI only needs the shape
        return {'type': 'string', 'format': 'uuid'}
