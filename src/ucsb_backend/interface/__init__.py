from .base import EntityInterface, GenericMessage
from .organizations import UCSBOrganizationInterface
