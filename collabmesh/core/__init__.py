"""Core primitives shared by every registry.

This package provides:
- Result contract: ``Ok`` / ``Err`` outcomes with a fixed error taxonomy
- Validation: emptiness predicates and structural field capacities
- Table: a persisted map from identity to record dict
"""
