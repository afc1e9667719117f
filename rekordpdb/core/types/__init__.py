from .device_string import DeviceSQLString

__all__ = ["DeviceSQLString"]
