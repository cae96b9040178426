"""Record data file generation."""

from .records import data_file_path, find_required_fields, format_records, write_records

__all__ = [
    'data_file_path',
    'find_required_fields',
    'format_records',
    'write_records'
]
