"""Resource handles with guaranteed release."""

from warden.resources.managed import ManagedResource, scoped

__all__ = ["ManagedResource", "scoped"]
