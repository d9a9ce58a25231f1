"""
Particle effect export pipeline

Builds the .gpart export tree for one effect and writes it to disk:
- Metadata (name, schema version, timestamp, exporter identity)
- Fourteen module translators run in a fixed order
- Deterministic JSON document, one file per effect
- Optional texture side-channel (PNG next to the document)
"""

import warnings
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional, Union

import yaml

from .core import (
    DEFAULT_EXTENSION,
    EXPORTER_ID,
    SCHEMA_VERSION,
    MetadataData,
    ModuleReadError,
    ParticleSystemExport,
)
from .modules import MODULE_TRANSLATORS
from .output import export_texture, write_document
from .source import EffectSource
from .source.loader import load_effect

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
_PATH_SEPARATORS = ('/', '\\')


@dataclass
class ExportConfig:
    """Configuration for the exporter."""
    output_dir: Path = Path("Export")
    extension: str = DEFAULT_EXTENSION
    indent: int = 4
    export_textures: bool = True

    def __post_init__(self):
        self.output_dir = Path(self.output_dir)

    @classmethod
    def from_yaml(cls, path: Path) -> 'ExportConfig':
        """Load configuration from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        output = data.get('output') or {}
        textures = data.get('textures') or {}
        return cls(
            output_dir=Path(output.get('directory', 'Export')),
            extension=str(output.get('extension', DEFAULT_EXTENSION)).lstrip('.'),
            indent=int(output.get('indent', 4)),
            export_textures=bool(textures.get('enabled', True)),
        )


class ExportErrorKind(str, Enum):
    NO_SELECTION = "NoSelection"
    MODULE_READ_FAILURE = "ModuleReadFailure"
    IO_FAILURE = "IOFailure"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


_EXIT_CODES = {
    ExportErrorKind.NO_SELECTION: 2,
    ExportErrorKind.MODULE_READ_FAILURE: 3,
    ExportErrorKind.IO_FAILURE: 4,
}


@dataclass(frozen=True)
class ExportError:
    kind: ExportErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


@dataclass(frozen=True)
class ExportResult:
    """Either the written file's path or the reason nothing was written."""
    path: Optional[Path] = None
    error: Optional[ExportError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        return 0 if self.error is None else self.error.kind.exit_code


def build_export_tree(effect: EffectSource,
                      exported_at: Optional[datetime] = None) -> ParticleSystemExport:
    """Translate every module of ``effect`` into a complete export tree.

    Any failure while reading a module is raised as ModuleReadError naming
    that module.
    """
    if exported_at is None:
        exported_at = datetime.now()

    try:
        name = effect.name
    except Exception as e:
        raise ModuleReadError("metadata", e) from e

    sections = {
        'metadata': MetadataData(
            name=name,
            version=SCHEMA_VERSION,
            export_date=exported_at.strftime(TIMESTAMP_FORMAT),
            exporter=EXPORTER_ID,
        ),
    }

    for key, translate in MODULE_TRANSLATORS:
        try:
            sections[key] = translate(effect)
        except ModuleReadError:
            raise
        except Exception as e:
            raise ModuleReadError(key, e) from e

    return ParticleSystemExport(**sections)


class ParticleExporter:
    """
    Exports particle effects to .gpart documents.

    Single catch boundary for the export: every failure comes back as an
    ExportResult instead of an exception. Texture problems are warnings only.
    """

    def __init__(self, config: Optional[ExportConfig] = None):
        self.config = config or ExportConfig()

    def output_path(self, effect_name: str, destination: Optional[Path] = None) -> Path:
        directory = Path(destination) if destination is not None else self.config.output_dir
        return directory / f"{effect_name}.{self.config.extension}"

    def export(self, effect: Optional[EffectSource],
               destination: Optional[Union[str, Path]] = None) -> ExportResult:
        """Export one effect. Overwrites an existing file of the same name."""
        if effect is None:
            return ExportResult(error=ExportError(
                ExportErrorKind.NO_SELECTION, "No particle effect selected"))

        try:
            tree = build_export_tree(effect)
        except ModuleReadError as e:
            return ExportResult(error=ExportError(ExportErrorKind.MODULE_READ_FAILURE, str(e)))

        name = tree.metadata.name
        if not name or name in ('.', '..') or any(sep in name for sep in _PATH_SEPARATORS):
            return ExportResult(error=ExportError(
                ExportErrorKind.IO_FAILURE, f"Effect name '{name}' is not a valid file name"))

        out_path = self.output_path(name, destination)
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            write_document(tree, out_path, indent=self.config.indent)
        except OSError as e:
            return ExportResult(error=ExportError(
                ExportErrorKind.IO_FAILURE, f"Could not write {out_path}: {e}"))
        except ValueError as e:
            # NaN or infinity in a module; nothing is written
            return ExportResult(error=ExportError(
                ExportErrorKind.MODULE_READ_FAILURE, f"'{name}' holds a value the format cannot represent: {e}"))

        print(f"Particle system exported to: {out_path}")

        if self.config.export_textures and tree.renderer is not None:
            export_texture(effect, tree.renderer.texture, out_path.parent)

        return ExportResult(path=out_path)


def main(argv=None) -> int:
    import argparse
    import sys

    parser = argparse.ArgumentParser(description="Export a particle effect to a .gpart document")
    parser.add_argument('effect', type=Path, help='Effect description YAML')
    parser.add_argument('--output', '-o', type=Path, help='Destination directory')
    parser.add_argument('--config', '-c', type=Path, help='Exporter config YAML')
    parser.add_argument('--no-textures', action='store_true', help='Skip texture export')
    args = parser.parse_args(argv)

    config = ExportConfig.from_yaml(args.config) if args.config else ExportConfig()
    if args.output is not None:
        config.output_dir = args.output
    if args.no_textures:
        config.export_textures = False

    try:
        effect = load_effect(args.effect)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Could not load effect description {args.effect}: {e}", file=sys.stderr)
        return 1

    with warnings.catch_warnings():
        warnings.simplefilter('always')
        result = ParticleExporter(config).export(effect)

    if not result.ok:
        print(f"Export failed: {result.error}", file=sys.stderr)
    return result.exit_code


if __name__ == '__main__':
    raise SystemExit(main())
