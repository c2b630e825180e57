# milkcentre/db/errors.py


class StoreError(Exception):
    """Base class for table store errors."""


class InitializationError(StoreError):
    pass


class NotInitializedError(StoreError):
    def __init__(self, message: str = "Database not initialized"):
        super().__init__(message)


class InvalidTableError(StoreError):
    def __init__(self, table):
        self.table = table
        super().__init__(f"Invalid table name: {table}")


class InvalidColumnError(StoreError):
    def __init__(self, table: str, column):
        self.table = table
        self.column = column
        super().__init__(f"Invalid column for {table}: {column}")


class InvalidQueryError(StoreError):
    pass
