"""Service layer: CLI-facing operations returning ServiceResult."""
