"""Infrastructure providers."""

# Importing the implementation registers it as a subclass of the component
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
