from .point_path_schemas import PointPathRecord

__all__ = ["PointPathRecord"]
