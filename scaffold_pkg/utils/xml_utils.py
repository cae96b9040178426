#!/usr/bin/env python3
"""
Metadata XML Helpers

Author: Ken Brill
Version: 1.0
Date: October 2026
License: MIT License

Small wrappers around ElementTree for building and rewriting Salesforce
metadata documents in the layout the Metadata API and the sf CLI produce.
"""
import xml.etree.ElementTree as ET
from pathlib import Path

SF_NAMESPACE = 'http://soap.sforce.com/2006/04/metadata'
NS = {'sf': SF_NAMESPACE}
XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'
INDENT = '    '

# Keep the metadata namespace as the default one when serializing
ET.register_namespace('', SF_NAMESPACE)


def sf_tag(name):
    """Qualified tag name in the metadata namespace."""
    return f'{{{SF_NAMESPACE}}}{name}'


def new_document(root_name):
    return ET.Element(sf_tag(root_name))


def add_text(parent, name, value):
    """
    Appends <name>value</name> to parent. Booleans are written the way the
    Metadata API expects them (true/false).
    """
    element = ET.SubElement(parent, sf_tag(name))
    if isinstance(value, bool):
        element.text = 'true' if value else 'false'
    elif value is not None:
        element.text = str(value)
    return element


def find_text(element, name):
    child = element.find(f'sf:{name}', NS)
    return child.text if child is not None else None


def to_xml_string(root):
    ET.indent(root, space=INDENT)
    return XML_HEADER + ET.tostring(root, encoding='unicode') + '\n'


def write_document(path, root):
    path = Path(path)
    path.write_text(to_xml_string(root), encoding='utf-8')
    return path


def read_document(path):
    """Parses a metadata file and returns its root element."""
    return ET.parse(path).getroot()
