from stockroom.domain.user.value_objects.email import Email

__all__ = ["Email"]
