"""Error taxonomy shared by the pipeline and the HTTP layer."""


class UnprocessableImage(ValueError):
    """No normalization strategy produced a usable payload."""


class GenerationFailure(RuntimeError):
    """A pose could not be rendered."""


class NoImageProduced(GenerationFailure):
    """The generation model answered without an image part."""
