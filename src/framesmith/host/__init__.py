from framesmith.host.base import FontUnavailableError, HostError, NodeFactory
from framesmith.host.memory import InMemoryHost, default_fonts

__all__ = [
    "NodeFactory",
    "HostError",
    "FontUnavailableError",
    "InMemoryHost",
    "default_fonts",
]
