# -*- coding: utf-8 -*-
"""
Application errors raised by the service layer.

These are not HTTP exceptions; the handler registered in ``main.py`` maps each
one to a status code and a ``{"error": message}`` body.
"""


class AppError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Missing or invalid input."""
    status_code = 400


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    """Event is full, or the participant is already registered."""
    status_code = 400


class StoreError(AppError):
    """Any database failure. The message is always generic."""
    status_code = 500


class MissingFieldsError(ValidationError):
    def __init__(self, fields):
        super().__init__("Missing required fields: " + ", ".join(fields))
        self.fields = fields
