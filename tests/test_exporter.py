"""Tests for the export pipeline and CLI."""

import json
import re
from datetime import datetime
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from gpart_export import (
    EffectDefinition,
    ExportConfig,
    ExportErrorKind,
    ParticleExporter,
    build_export_tree,
)
from gpart_export.core import MissingRendererWarning, ModuleReadError, TextureExportWarning
from gpart_export.exporter import main
from gpart_export.source import Material, RendererComponent, Texture

SAMPLES = Path(__file__).resolve().parent.parent / "samples"


class BrokenNoise(EffectDefinition):
    @property
    def noise(self):
        raise RuntimeError("noise settings unavailable")


class UnreadableTexture(Texture):
    def read_pixels(self):
        raise RuntimeError("GPU readback failed")


class TextureLookupFails(EffectDefinition):
    def find_texture(self, name):
        raise KeyError(name)


def _load(path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


class TestBuildTree:
    def test_metadata(self, explosion):
        tree = build_export_tree(explosion, exported_at=datetime(2024, 5, 1, 12, 30, 0))
        assert tree.metadata.name == "Explosion"
        assert tree.metadata.version == "1.0"
        assert tree.metadata.export_date == "2024-05-01 12:30:00"
        assert tree.metadata.exporter == "gpart-export v1.0"

    def test_default_timestamp_format(self, explosion):
        stamp = build_export_tree(explosion).metadata.export_date
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", stamp)

    def test_module_failure_names_the_module(self):
        with pytest.raises(ModuleReadError) as excinfo:
            build_export_tree(BrokenNoise())
        assert excinfo.value.module == "noise"
        assert isinstance(excinfo.value.cause, RuntimeError)


class TestExport:
    def test_explosion(self, explosion, tmp_path):
        result = ParticleExporter().export(explosion, tmp_path)
        assert result.ok
        assert result.path == tmp_path / "Explosion.gpart"

        doc = _load(result.path)
        assert doc["system"]["duration"] == 2.5
        assert doc["system"]["looping"] is False
        assert doc["system"]["maxParticles"] == 500
        assert doc["emission"]["bursts"] == [
            {"time": 0.0, "minCount": 10, "maxCount": 20, "cycles": 1, "repeatInterval": 0.0},
        ]
        assert doc["collision"]["enabled"] is False
        assert doc["collision"]["type"] == "World"

    def test_completeness(self, full_effect, tmp_path):
        with pytest.warns(TextureExportWarning):
            result = ParticleExporter().export(full_effect, tmp_path)
        doc = _load(result.path)
        assert len(doc) == 15
        assert all(doc[key] is not None for key in doc)
        assert doc["subEmitters"] == [{"type": "Death", "name": "Sparks"}]
        assert doc["shape"]["boxScale"] == doc["shape"]["scale"] == {"x": 2.0, "y": 3.0, "z": 4.0}

    def test_no_renderer(self, explosion, tmp_path):
        explosion.renderer = None
        with pytest.warns(MissingRendererWarning):
            result = ParticleExporter().export(explosion, tmp_path)
        assert result.ok
        doc = _load(result.path)
        assert "renderer" not in doc
        assert len(doc) == 14

    def test_creates_destination(self, explosion, tmp_path):
        dest = tmp_path / "a" / "b"
        result = ParticleExporter().export(explosion, dest)
        assert result.path.parent == dest
        assert result.path.exists()

    def test_config_controls_location_and_extension(self, explosion, tmp_path):
        config = ExportConfig(output_dir=tmp_path / "out", extension="json", indent=2)
        result = ParticleExporter(config).export(explosion)
        assert result.path == tmp_path / "out" / "Explosion.json"
        assert result.path.read_text(encoding="utf-8").splitlines()[1].startswith('  "metadata"')

    def test_reexport_overwrites_with_same_content(self, explosion, tmp_path):
        exporter = ParticleExporter()
        first = _load(exporter.export(explosion, tmp_path).path)
        second = _load(exporter.export(explosion, tmp_path).path)
        first["metadata"].pop("exportDate")
        second["metadata"].pop("exportDate")
        assert first == second
        assert [p.name for p in tmp_path.iterdir()] == ["Explosion.gpart"]

    def test_overwrites_existing_file(self, explosion, tmp_path):
        (tmp_path / "Explosion.gpart").write_text("stale", encoding="utf-8")
        result = ParticleExporter().export(explosion, tmp_path)
        assert _load(result.path)["metadata"]["name"] == "Explosion"

    def test_reports_written_path(self, explosion, tmp_path, capsys):
        ParticleExporter().export(explosion, tmp_path)
        assert "Explosion.gpart" in capsys.readouterr().out


class TestErrors:
    def test_no_selection(self, tmp_path):
        result = ParticleExporter().export(None, tmp_path)
        assert not result.ok
        assert result.error.kind is ExportErrorKind.NO_SELECTION
        assert result.exit_code == 2

    def test_module_read_failure_writes_nothing(self, tmp_path):
        result = ParticleExporter().export(BrokenNoise(effect_name="Broken"), tmp_path)
        assert result.error.kind is ExportErrorKind.MODULE_READ_FAILURE
        assert "noise settings unavailable" in result.error.message
        assert result.exit_code == 3
        assert list(tmp_path.iterdir()) == []

    def test_io_failure(self, explosion, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        result = ParticleExporter().export(explosion, blocker / "out")
        assert result.error.kind is ExportErrorKind.IO_FAILURE
        assert result.exit_code == 4
        assert result.path is None

    def test_non_finite_value_writes_nothing(self, tmp_path):
        effect = EffectDefinition(effect_name="Bad")
        effect.main.duration = float("nan")
        result = ParticleExporter().export(effect, tmp_path)
        assert result.error.kind is ExportErrorKind.MODULE_READ_FAILURE
        assert "Bad" in result.error.message
        assert list(tmp_path.iterdir()) == []

    @pytest.mark.parametrize("name", ["../x", "a/b", "a\\b", "..", ""])
    def test_effect_name_with_path_parts_rejected(self, name, tmp_path):
        out = tmp_path / "out"
        result = ParticleExporter().export(EffectDefinition(effect_name=name), out)
        assert result.error.kind is ExportErrorKind.IO_FAILURE
        assert "not a valid file name" in result.error.message
        assert list(tmp_path.iterdir()) == []

    def test_exit_codes_are_distinct(self):
        codes = [kind.exit_code for kind in ExportErrorKind]
        assert len(set(codes)) == len(codes)
        assert 0 not in codes


class TestTextures:
    def test_texture_written_next_to_document(self, textured_effect, tmp_path):
        result = ParticleExporter().export(textured_effect, tmp_path)
        png = tmp_path / "smoke.png"
        assert result.ok
        assert png.exists()
        with Image.open(png) as img:
            assert img.size == (8, 4)
            assert img.mode == "RGBA"
            assert img.getpixel((0, 0)) == (255, 0, 0, 255)

    def test_float_pixels(self, tmp_path):
        texture = Texture(name="glow", pixels=np.full((2, 2, 4), 0.5, dtype=np.float32))
        effect = EffectDefinition(renderer=RendererComponent(material=Material(main_texture=texture)))
        ParticleExporter().export(effect, tmp_path)
        with Image.open(tmp_path / "glow.png") as img:
            assert img.getpixel((1, 1)) == (128, 128, 128, 128)

    def test_texture_from_image_file(self, tmp_path):
        src = tmp_path / "src.png"
        Image.new("RGBA", (3, 5), (0, 255, 0, 255)).save(src)
        texture = Texture(name="leaf", image_path=src)
        effect = EffectDefinition(renderer=RendererComponent(material=Material(main_texture=texture)))
        ParticleExporter().export(effect, tmp_path / "out")
        with Image.open(tmp_path / "out" / "leaf.png") as img:
            assert img.size == (3, 5)

    def test_unreadable_texture_only_warns(self, full_effect, tmp_path):
        with pytest.warns(TextureExportWarning, match="fire"):
            result = ParticleExporter().export(full_effect, tmp_path)
        assert result.ok
        assert not (tmp_path / "fire.png").exists()

    def test_texture_read_error_only_warns(self, tmp_path):
        texture = UnreadableTexture(name="ember")
        effect = EffectDefinition(renderer=RendererComponent(material=Material(main_texture=texture)))
        with pytest.warns(TextureExportWarning, match="GPU readback failed"):
            result = ParticleExporter().export(effect, tmp_path)
        assert result.ok
        assert result.path.exists()
        assert not (tmp_path / "ember.png").exists()

    def test_texture_lookup_error_only_warns(self, textured_effect, tmp_path):
        effect = TextureLookupFails(effect_name="Smoke", renderer=textured_effect.get_renderer())
        with pytest.warns(TextureExportWarning, match="smoke"):
            result = ParticleExporter().export(effect, tmp_path)
        assert result.ok
        assert not (tmp_path / "smoke.png").exists()

    def test_textures_disabled(self, textured_effect, tmp_path):
        ParticleExporter(ExportConfig(export_textures=False)).export(textured_effect, tmp_path)
        assert not (tmp_path / "smoke.png").exists()


class TestConfig:
    def test_from_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "output:\n  directory: build/fx\n  extension: .gpart\n  indent: 2\n"
            "textures:\n  enabled: false\n",
            encoding="utf-8",
        )
        config = ExportConfig.from_yaml(path)
        assert config.output_dir == Path("build/fx")
        assert config.extension == "gpart"
        assert config.indent == 2
        assert config.export_textures is False

    def test_empty_yaml_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert ExportConfig.from_yaml(path) == ExportConfig()


    def test_empty_sections_use_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("output:\ntextures:\n", encoding="utf-8")
        assert ExportConfig.from_yaml(path) == ExportConfig()


class TestCLI:
    def test_exports_sample(self, tmp_path):
        assert main([str(SAMPLES / "explosion.yaml"), "-o", str(tmp_path)]) == 0
        doc = _load(tmp_path / "Explosion.gpart")
        assert doc["system"]["duration"] == 2.0
        assert doc["subEmitters"] == [{"type": "Death", "name": "Sparks"}]

    def test_config_file(self, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text(f"output:\n  directory: {tmp_path / 'fx'}\n  extension: fx\n", encoding="utf-8")
        assert main([str(SAMPLES / "explosion.yaml"), "-c", str(config), "--no-textures"]) == 0
        assert (tmp_path / "fx" / "Explosion.fx").exists()

    def test_missing_effect_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.yaml"), "-o", str(tmp_path)]) == 1
        assert "nope.yaml" in capsys.readouterr().err

    def test_io_failure_exit_code(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")
        assert main([str(SAMPLES / "explosion.yaml"), "-o", str(blocker)]) == 4

    def test_malformed_effect_description(self, tmp_path, capsys):
        effect = tmp_path / "bad.yaml"
        effect.write_text("emission: {bursts: [5]}\n", encoding="utf-8")
        assert main([str(effect), "-o", str(tmp_path / "out")]) == 1
        assert "must be a mapping" in capsys.readouterr().err
        assert not (tmp_path / "out").exists()
