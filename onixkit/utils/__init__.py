"""Logging and configuration plumbing shared by onixkit modules."""
