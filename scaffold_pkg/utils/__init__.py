"""Shared console, configuration, XML and sf CLI helpers."""
