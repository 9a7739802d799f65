from .bridge_factory import BridgeFactory

__all__ = ["BridgeFactory"]
