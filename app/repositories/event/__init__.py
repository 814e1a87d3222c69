from app.repositories.event.event import EventRepository

__all__ = ["EventRepository"]
