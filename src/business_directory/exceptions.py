"""
Business directory exceptions.

Every public operation translates underlying store errors into one coarse condition
specific to that operation. The original error is kept as __cause__.
"""


class BusinessDirectoryError(Exception):
    """Base class for all business directory failures."""


class StoreFailure(BusinessDirectoryError):
    """The entity store failed while serving an operation."""


class TagFetchError(StoreFailure):
    """Tag relations or tags could not be read."""

    def __init__(self, message: str = "Failed to fetch tags"):
        super().__init__(message)


class DuplicateBusinessError(StoreFailure):
    """A business with the caller-supplied id already exists."""

    def __init__(self, business_id: str):
        self.business_id = business_id
        super().__init__(f"Business with id {business_id!r} already exists")


class BusinessNotFoundError(BusinessDirectoryError):
    """No business matches the requested id."""

    def __init__(self, business_id: str):
        self.business_id = business_id
        super().__init__(f"Business not found: {business_id!r}")


class NoChangeOrNotFoundError(BusinessDirectoryError):
    """An update matched no rows, either because the id is unknown or nothing was updatable."""

    def __init__(self, business_id: str, message: str = "Business not found or no changes made"):
        self.business_id = business_id
        super().__init__(message)


class TagProcessingError(BusinessDirectoryError):
    """
    Tag normalization failed part way.

    Tags and relations committed before the failure are kept. When raised from
    BusinessWriter.create, `business` holds the already-committed business record.
    """

    def __init__(self, message: str = "Failed to process and save tags", business=None):
        self.business = business
        super().__init__(message)
