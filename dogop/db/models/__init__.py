from dogop.db.models.offer import Offer

__all__ = ["Offer"]
