from .obj import load_obj, save_obj

__all__ = ["load_obj", "save_obj"]
