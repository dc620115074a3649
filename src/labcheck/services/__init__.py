"""Service layer: wraps domain rules into ServiceResult-returning operations."""
