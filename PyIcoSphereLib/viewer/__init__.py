from .controller import DepthController

__all__ = ["DepthController"]
