from typing import Annotated
from fastapi import Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from ucsb_backend.interface.base import EntityInterface
from ucsb_backend.model.organization import UCSBOrganization

class UCSBOrganizationBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    org_code: str = Field(description="Organization code, unique identifier")
    org_translation_short: str = Field(description="Short display name")
    org_translation: str = Field(description="Full display name")
    inactive: bool = Field(description="Organization status flag")

class UCSBOrganizationCreate(UCSBOrganizationBase):

    @classmethod
    def from_query(
        cls,
        org_code: Annotated[str, Query(alias="orgCode")],
        org_translation_short: Annotated[str, Query(alias="orgTranslationShort")],
        org_translation: Annotated[str, Query(alias="orgTranslation")],
        inactive: Annotated[bool, Query(alias="inactive")],
    ):
        return cls(
            org_code=org_code,
            org_translation_short=org_translation_short,
            org_translation=org_translation,
            inactive=inactive,
        )

class UCSBOrganizationUpdate(UCSBOrganizationBase):
    org_code: str = Field(min_length=1, max_length=255)
    org_translation_short: str = Field(min_length=1, max_length=255)
    org_translation: str = Field(min_length=1, max_length=1024)

    @field_validator('org_code')
    @classmethod
    def validate_org_code(cls, v):
        if v.strip() != v:
            raise ValueError('orgCode must not have leading or trailing whitespace')
        return v

    @classmethod
    async def from_body(cls, request: Request):
        """
        Read the update from the JSON request body.

        Used as a dependency so the body is only read once the caller has
        passed the role gate.
        """
        try:
            raw = await request.json()
        except ValueError as e:
            raise RequestValidationError(
                [{"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error", "input": {}, "ctx": {"error": str(e)}}]
            )

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            errors = [{**error, "loc": ("body", *error["loc"])} for error in e.errors(include_url=False)]
            raise RequestValidationError(errors, body=raw)

class UCSBOrganizationGet(UCSBOrganizationBase):
    pass

class UCSBOrganizationList(UCSBOrganizationBase):
    pass

class UCSBOrganizationInterface(EntityInterface):
    create = UCSBOrganizationCreate
    get = UCSBOrganizationGet
    list = UCSBOrganizationList
    update = UCSBOrganizationUpdate
    endpoint = "ucsborganizations"
    model = UCSBOrganization

    display_name = "UCSBOrganization"
