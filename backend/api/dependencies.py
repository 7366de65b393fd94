"""Shared dependencies for API routes."""

from fastapi import Request

from services.validation.validator import ResumeMatchValidator


def get_validator(request: Request) -> ResumeMatchValidator:
    return request.app.state.validator
