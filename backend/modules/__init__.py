"""
Feature modules for the storefront core.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for a module's service, where it has one
- models.py: Pydantic models and enumerations
- service.py (or one file per feature): Implementation
- exceptions.py: Module-specific exceptions

Modules communicate through interfaces, not concrete implementations.
"""
