import logging
from typing import Any
from pydantic import BaseModel
from ucsb_backend.interface.base import EntityInterface, GenericMessage
from ucsb_backend.repositories.base import BaseRepository, DuplicateError

logger = logging.getLogger(__name__)

def list_entities(repository: BaseRepository, interface: EntityInterface) -> list:

    return [interface.list.model_validate(entity, from_attributes=True) for entity in repository.list()]

def get_entity(repository: BaseRepository, id: Any, interface: EntityInterface):

    entity = repository.get_by_id(id)

    return interface.get.model_validate(entity, from_attributes=True)

def create_entity(repository: BaseRepository, entity: BaseModel, interface: EntityInterface):
    """
    Store a new entity built from the request values.

    The write is an upsert: a record already stored under the same
    identifier is overwritten.
    """
    db_item = interface.model(**entity.model_dump())

    db_item = repository.upsert(db_item)

    logger.info(f"Saved {interface.get_display_name()} with id {repository.identify(db_item)}")

    return interface.get.model_validate(db_item, from_attributes=True)

def update_entity(repository: BaseRepository, id: Any, entity: BaseModel, interface: EntityInterface):
    """
    Overwrite every field of the entity stored under ``id``.

    The identifier itself may change. This is a rename, so the new
    identifier must not belong to another stored entity.
    """
    db_item = repository.get_by_id(id)

    values = entity.model_dump()
    new_id = values.get(repository.id_column, id)

    if new_id != id and repository.exists(new_id):
        raise DuplicateError(repository.entity_type, new_id)

    for key, value in values.items():
        setattr(db_item, key, value)

    db_item = repository.upsert(db_item)

    if new_id != id:
        logger.info(f"Renamed {interface.get_display_name()} {id} to {new_id}")

    return interface.get.model_validate(db_item, from_attributes=True)

def delete_entity(repository: BaseRepository, id: Any, interface: EntityInterface) -> GenericMessage:

    db_item = repository.get_by_id(id)

    repository.delete(db_item)

    logger.info(f"Deleted {interface.get_display_name()} with id {id}")

    return GenericMessage(message=f"{interface.get_display_name()} with id {id} deleted")
