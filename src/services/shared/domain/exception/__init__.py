from .exceptions import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exceptions import DomainException as DomainException
from .exceptions import IncompleteLinkException as IncompleteLinkException
from .exceptions import InsufficientSeatsException as InsufficientSeatsException
from .exceptions import (
    InvalidBookingStateException as InvalidBookingStateException,
)
from .exceptions import InvalidDraftStepException as InvalidDraftStepException
from .exceptions import NoReversedRouteException as NoReversedRouteException
from .exceptions import OptimisticLockException as OptimisticLockException
from .exceptions import (
    PartialCancellationException as PartialCancellationException,
)
from .exceptions import PersistenceException as PersistenceException
from .exceptions import RemoteFailureException as RemoteFailureException
from .exceptions import ResourceNotFoundException as ResourceNotFoundException
from .exceptions import ValidationException as ValidationException
