"""Shared core helpers for the API."""

SERVICE_NAME = "locomotive-api"
