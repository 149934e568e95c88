"""Recruitment portal backend."""
