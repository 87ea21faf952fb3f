"""
Application services.

UserService validates commands and drives the UserRepository port.
Knows nothing about HTTP or storage details.
"""
