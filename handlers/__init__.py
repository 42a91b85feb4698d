"""
handlers/ - Presentation Layer
================================
HTTP route handlers. Each handler validates the request shape,
delegates to the appropriate Repository or Service, and returns JSON.
No business logic lives here.
"""
