from .notion import NotionDatabaseFake

__all__ = ["NotionDatabaseFake"]
