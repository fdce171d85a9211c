"""Logging, log file, and preference plumbing."""
