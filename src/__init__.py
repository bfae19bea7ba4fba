"""マルチテナントストアフロントのカート/チェックアウトパッケージ."""
from . import domain

__all__ = ["domain"]
