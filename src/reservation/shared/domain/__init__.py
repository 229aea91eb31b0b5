from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    FieldError as FieldError,
)
from .exception import (
    InvalidTransitionException as InvalidTransitionException,
)
from .exception import (
    PersistenceException as PersistenceException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exception import (
    ValidationException as ValidationException,
)
from .repository import SnapshotRepository as SnapshotRepository
