from .delete_entity import DeleteEntityUseCase

__all__ = ["DeleteEntityUseCase"]
