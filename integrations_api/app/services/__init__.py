"""
Service layer abstraction.

``ResourceService`` holds the request-handling logic shared by every
resource: existence check, delegation to the repository and error
mapping.  ``UserService`` adds the lookup by login.
"""

from .resource_service import ResourceService, UserService

__all__ = ["ResourceService", "UserService"]
