"""
Workflows package.

Workflows orchestrate components for one user-facing operation: they load the
project, call components, enforce business rules and return result DTOs.
"""
