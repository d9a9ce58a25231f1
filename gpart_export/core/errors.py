"""Exception and warning types shared by the codecs, translators and exporter."""


class InvalidInputError(ValueError):
    """A required source value was absent or outside its enumeration."""


class ModuleReadError(RuntimeError):
    """Reading a module from the source effect failed."""

    def __init__(self, module: str, cause: Exception):
        super().__init__(f"Failed to read module '{module}': {cause}")
        self.module = module
        self.cause = cause


class MissingRendererWarning(UserWarning):
    """The effect has no renderer attached; the renderer field is left unset."""


class TextureExportWarning(UserWarning):
    """The renderer's main texture could not be written alongside the export."""
