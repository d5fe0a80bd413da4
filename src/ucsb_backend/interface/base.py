from abc import ABC
from typing import Any
from pydantic import BaseModel

class EntityInterface(ABC):
    create: BaseModel = None
    get: BaseModel = None
    list: BaseModel = None
    update: BaseModel = None
    endpoint: str = None
    model: Any = None

    # Used in confirmation messages
    display_name: str = None

    @classmethod
    def get_display_name(cls) -> str:
        return cls.display_name or cls.model.__name__

class GenericMessage(BaseModel):
    message: str
