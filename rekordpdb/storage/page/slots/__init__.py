from .bitmap_slot import PresenceBitmap

__all__ = ["PresenceBitmap"]
