"""Shared helpers for the secondbrain tools."""
