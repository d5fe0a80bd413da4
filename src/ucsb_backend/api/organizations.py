from typing import Annotated
from fastapi import APIRouter, Depends, Query
from ucsb_backend.api.crud import create_entity, delete_entity, get_entity, list_entities, update_entity
from ucsb_backend.interface.base import GenericMessage
from ucsb_backend.interface.organizations import (
    UCSBOrganizationCreate,
    UCSBOrganizationGet,
    UCSBOrganizationInterface,
    UCSBOrganizationList,
    UCSBOrganizationUpdate,
)
from ucsb_backend.permissions.auth import require_role
from ucsb_backend.permissions.core import ADMIN, USER
from ucsb_backend.permissions.principal import Principal
from ucsb_backend.repositories.organization import UCSBOrganizationRepository, get_organization_repository

organization_router = APIRouter()

require_user = require_role(USER)
require_admin = require_role(ADMIN)

OrgCodeQuery = Annotated[str, Query(alias="orgCode", description="Organization code")]
RepositoryDep = Annotated[UCSBOrganizationRepository, Depends(get_organization_repository)]

@organization_router.get("/all", response_model=list[UCSBOrganizationList], summary="List all ucsb organizations")
def list_organizations(
    principal: Annotated[Principal, Depends(require_user)],
    repository: RepositoryDep):

    return list_entities(repository, UCSBOrganizationInterface)

@organization_router.get("", response_model=UCSBOrganizationGet, summary="Get a single organization")
def get_organization(
    principal: Annotated[Principal, Depends(require_user)],
    org_code: OrgCodeQuery,
    repository: RepositoryDep):

    return get_entity(repository, org_code, UCSBOrganizationInterface)

@organization_router.post("/post", response_model=UCSBOrganizationGet, summary="Create a new organization")
def create_organization(
    principal: Annotated[Principal, Depends(require_admin)],
    entity: Annotated[UCSBOrganizationCreate, Depends(UCSBOrganizationCreate.from_query)],
    repository: RepositoryDep):

    return create_entity(repository, entity, UCSBOrganizationInterface)

@organization_router.delete("", response_model=GenericMessage, summary="Delete a UCSBOrganization")
def delete_organization(
    principal: Annotated[Principal, Depends(require_admin)],
    org_code: OrgCodeQuery,
    repository: RepositoryDep):

    return delete_entity(repository, org_code, UCSBOrganizationInterface)

@organization_router.put(
    "",
    response_model=UCSBOrganizationGet,
    summary="Update a single UCSBOrganization",
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": UCSBOrganizationUpdate.model_json_schema()}},
            "required": True,
        }
    })
def update_organization(
    principal: Annotated[Principal, Depends(require_admin)],
    org_code: OrgCodeQuery,
    entity: Annotated[UCSBOrganizationUpdate, Depends(UCSBOrganizationUpdate.from_body)],
    repository: RepositoryDep):

    return update_entity(repository, org_code, entity, UCSBOrganizationInterface)
