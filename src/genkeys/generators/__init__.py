from genkeys.generators.formats import RENDERERS, ConfigFormat, renderer_for
from genkeys.generators.quoting import posix_quote

__all__ = ["ConfigFormat", "RENDERERS", "posix_quote", "renderer_for"]
