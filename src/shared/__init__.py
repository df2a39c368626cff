"""
Shared Layer

Responsibility:
    Cross-cutting concerns used across all layers.

Contains:
    - config: environment-backed Settings (get_settings, reset_settings)

Does NOT contain:
    - Business logic
    - Infrastructure implementations
"""
