"""
Service layer abstraction.

Each service encapsulates the business logic and SQL for one domain and
raises the errors from ``core.errors``; API handlers stay thin.
"""
