"""Salesforce metadata scaffolding: objects, fields, layouts, tabs, permission sets and data files."""

__version__ = '1.0.0'
