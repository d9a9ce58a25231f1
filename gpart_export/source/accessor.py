"""Source effect accessor.

``EffectSource`` is the read-only view the exporter walks. Any authoring-tool
binding implements it; ``EffectDefinition`` is the in-memory implementation
used by the YAML loader and the tests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from .model import (
    CollisionModule,
    ColorOverLifetimeModule,
    EmissionModule,
    ForceOverLifetimeModule,
    LimitVelocityOverLifetimeModule,
    MainModule,
    NoiseModule,
    RendererComponent,
    RotationOverLifetimeModule,
    ShapeModule,
    SizeOverLifetimeModule,
    SubEmittersModule,
    Texture,
    TextureSheetAnimationModule,
    VelocityOverLifetimeModule,
)


class EffectSource(ABC):
    """Read access to one particle-effect definition."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def main(self) -> MainModule:
        pass

    @property
    @abstractmethod
    def emission(self) -> EmissionModule:
        pass

    @property
    @abstractmethod
    def shape(self) -> ShapeModule:
        pass

    @property
    @abstractmethod
    def velocity_over_lifetime(self) -> VelocityOverLifetimeModule:
        pass

    @property
    @abstractmethod
    def limit_velocity_over_lifetime(self) -> LimitVelocityOverLifetimeModule:
        pass

    @property
    @abstractmethod
    def force_over_lifetime(self) -> ForceOverLifetimeModule:
        pass

    @property
    @abstractmethod
    def color_over_lifetime(self) -> ColorOverLifetimeModule:
        pass

    @property
    @abstractmethod
    def size_over_lifetime(self) -> SizeOverLifetimeModule:
        pass

    @property
    @abstractmethod
    def rotation_over_lifetime(self) -> RotationOverLifetimeModule:
        pass

    @property
    @abstractmethod
    def noise(self) -> NoiseModule:
        pass

    @property
    @abstractmethod
    def collision(self) -> CollisionModule:
        pass

    @property
    @abstractmethod
    def texture_sheet_animation(self) -> TextureSheetAnimationModule:
        pass

    @property
    @abstractmethod
    def sub_emitters(self) -> SubEmittersModule:
        pass

    @abstractmethod
    def get_renderer(self) -> Optional[RendererComponent]:
        """Attached renderer component, or None if the effect has none."""
        pass

    def find_texture(self, texture_name: str) -> Optional[Texture]:
        """Resolve a main-texture name against the attached renderer's material."""
        renderer = self.get_renderer()
        if renderer is None or renderer.material is None:
            return None
        texture = renderer.material.main_texture
        if texture is None or texture.name != texture_name:
            return None
        return texture


@dataclass
class ModuleSet:
    """All modules of one effect, each with the authoring tool's defaults."""
    main: MainModule = field(default_factory=MainModule)
    emission: EmissionModule = field(default_factory=EmissionModule)
    shape: ShapeModule = field(default_factory=ShapeModule)
    velocity_over_lifetime: VelocityOverLifetimeModule = field(default_factory=VelocityOverLifetimeModule)
    limit_velocity_over_lifetime: LimitVelocityOverLifetimeModule = field(
        default_factory=LimitVelocityOverLifetimeModule)
    force_over_lifetime: ForceOverLifetimeModule = field(default_factory=ForceOverLifetimeModule)
    color_over_lifetime: ColorOverLifetimeModule = field(default_factory=ColorOverLifetimeModule)
    size_over_lifetime: SizeOverLifetimeModule = field(default_factory=SizeOverLifetimeModule)
    rotation_over_lifetime: RotationOverLifetimeModule = field(default_factory=RotationOverLifetimeModule)
    noise: NoiseModule = field(default_factory=NoiseModule)
    collision: CollisionModule = field(default_factory=CollisionModule)
    texture_sheet_animation: TextureSheetAnimationModule = field(default_factory=TextureSheetAnimationModule)
    sub_emitters: SubEmittersModule = field(default_factory=SubEmittersModule)


@dataclass
class EffectDefinition(EffectSource):
    """In-memory effect definition."""
    effect_name: str = "ParticleSystem"
    modules: ModuleSet = field(default_factory=ModuleSet)
    renderer: Optional[RendererComponent] = field(default_factory=RendererComponent)

    @property
    def name(self) -> str:
        return self.effect_name

    @property
    def main(self) -> MainModule:
        return self.modules.main

    @property
    def emission(self) -> EmissionModule:
        return self.modules.emission

    @property
    def shape(self) -> ShapeModule:
        return self.modules.shape

    @property
    def velocity_over_lifetime(self) -> VelocityOverLifetimeModule:
        return self.modules.velocity_over_lifetime

    @property
    def limit_velocity_over_lifetime(self) -> LimitVelocityOverLifetimeModule:
        return self.modules.limit_velocity_over_lifetime

    @property
    def force_over_lifetime(self) -> ForceOverLifetimeModule:
        return self.modules.force_over_lifetime

    @property
    def color_over_lifetime(self) -> ColorOverLifetimeModule:
        return self.modules.color_over_lifetime

    @property
    def size_over_lifetime(self) -> SizeOverLifetimeModule:
        return self.modules.size_over_lifetime

    @property
    def rotation_over_lifetime(self) -> RotationOverLifetimeModule:
        return self.modules.rotation_over_lifetime

    @property
    def noise(self) -> NoiseModule:
        return self.modules.noise

    @property
    def collision(self) -> CollisionModule:
        return self.modules.collision

    @property
    def texture_sheet_animation(self) -> TextureSheetAnimationModule:
        return self.modules.texture_sheet_animation

    @property
    def sub_emitters(self) -> SubEmittersModule:
        return self.modules.sub_emitters

    def get_renderer(self) -> Optional[RendererComponent]:
        return self.renderer
