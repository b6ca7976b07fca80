"""
Application layer package.

This package contains use cases, services, dashboards and interfaces that
implement the business logic of the application.
"""
