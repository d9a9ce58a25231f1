"""
Output: .gpart document emission/reading and the texture side-channel.
"""

from .document import to_document, dumps, write_document, read_document, load_document, format_float32
from .texture_writer import export_texture

__all__ = [
    'to_document',
    'dumps',
    'write_document',
    'read_document',
    'load_document',
    'format_float32',
    'export_texture',
]
