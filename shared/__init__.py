"""
Shared Kernel

Domain errors, date value objects and the infrastructure helpers
(exception handler, row locking) used by every app.
"""
