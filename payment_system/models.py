from .domain.models.transaction import Transaction


__all__ = ["Transaction"]
