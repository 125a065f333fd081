from myoenergy.utils.types import beartowertype

__all__ = ["beartowertype"]
