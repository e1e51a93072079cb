from .oembed import OEmbedClient, strip_scripts

__all__ = ["OEmbedClient", "strip_scripts"]
