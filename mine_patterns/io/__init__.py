"""Filesystem helpers for run outputs."""
