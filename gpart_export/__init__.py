"""
gpart-export: Particle Effect Exporter

Writes particle-effect definitions to the versioned .gpart interchange format:
- Value codecs for vectors, colors, curves, scalar ranges, gradients, bursts
- One translator per particle-system module (14 in total)
- Deterministic, indented JSON document with 32-bit float precision

Usage:
    from gpart_export import ParticleExporter, ExportConfig
    from gpart_export.source.loader import load_effect

    effect = load_effect("explosion.yaml")
    result = ParticleExporter(ExportConfig(output_dir="Export")).export(effect)
    print(result.path)

CLI:
    python -m gpart_export.exporter explosion.yaml --output ./Export
"""

from .exporter import (
    ParticleExporter,
    ExportConfig,
    ExportResult,
    ExportError,
    ExportErrorKind,
    build_export_tree,
)
from .source import EffectSource, EffectDefinition
from .source.loader import load_effect
from .core import ParticleSystemExport, ModuleReadError
from .output import dumps, write_document, load_document

__all__ = [
    'ParticleExporter',
    'ExportConfig',
    'ExportResult',
    'ExportError',
    'ExportErrorKind',
    'build_export_tree',
    'EffectSource',
    'EffectDefinition',
    'load_effect',
    'ParticleSystemExport',
    'ModuleReadError',
    'dumps',
    'write_document',
    'load_document',
]
