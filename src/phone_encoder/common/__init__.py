"""Shared configuration, types and file helpers for the phone encoder."""
