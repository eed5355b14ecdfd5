from readpulse.models.book import Book, BookStatus
from readpulse.models.session import ReadingSession
from readpulse.models.user import User

__all__ = ["Book", "BookStatus", "ReadingSession", "User"]
