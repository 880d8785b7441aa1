"""
Feature modules for the notes client core.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the remote capability it consumes
- models.py: Pydantic models for state snapshots and payloads
- client.py: HTTP implementation of the interface over shared.ApiClient
- store.py / service.py: State container and orchestration logic
- exceptions.py: Module-specific exceptions

Modules receive their collaborators through constructors, never via
module-level singletons.
"""
