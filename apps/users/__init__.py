"""Users app package.

Defines the custom user model (email login, guest/seller roles) and the
user directory lookup used by the booking services. Use
``apps.users.models.CustomUser`` as the AUTH_USER_MODEL throughout the
project.
"""
