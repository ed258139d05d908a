"""Database metadata: the declarative Base shared by every ORM model."""
