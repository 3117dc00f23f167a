from .identity_provider import IdentityProvider as IdentityProvider
from .identity_provider import StaticIdentityProvider as StaticIdentityProvider
