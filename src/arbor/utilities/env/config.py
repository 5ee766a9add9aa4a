from arbor.utilities.env.display import DisplayConfiguration
from arbor.utilities.env.rendering import RenderingConfiguration


class Configuration(
    DisplayConfiguration,
    RenderingConfiguration,
):
    """Aggregate environment configuration helpers."""
