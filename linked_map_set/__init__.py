from .errors import (
  DuplicateValueError as DuplicateValueError,
  MissingValueError as MissingValueError,
)

from .linked_set import LinkedSet as LinkedSet
from .linked_set import Node as Node
