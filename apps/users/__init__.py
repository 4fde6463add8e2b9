"""Users app package.

Holds the custom user model (``apps.users.models.CustomUser`` is the
AUTH_USER_MODEL), login sessions and the session validator every use case
calls before acting on behalf of a user. Users also carry their running
rating aggregates as lessor and as lessee.
"""
