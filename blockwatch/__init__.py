"""blockwatch - watch subscribed addresses in the latest EVM block."""

__version__ = "0.1.0"
__logo__ = "⛓"
