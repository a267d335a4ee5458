class ConfiguratorException(Exception):
    """Base exception for all configurator-related errors."""
    pass

class RepositoryLookupException(ConfiguratorException):
    """Raised when a repository lookup against GitHub fails."""
    pass

class InvalidRepositoryIdentifierException(RepositoryLookupException):
    """Raised when the identifier is not of the form owner/name."""
    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Invalid repository identifier: {identifier!r}. Expected 'owner/name'.")

class RepositoryNotFoundException(RepositoryLookupException):
    """Raised when GitHub reports no repository for the identifier."""
    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Repository {identifier} could not be found.")

class RepositoryNotEligibleException(RepositoryLookupException):
    """Raised when the repository exists but cannot host giscus discussions."""
    def __init__(self, identifier: str, reason: str):
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Repository {identifier} cannot be used: {reason}.")

class RateLimitExceededException(RepositoryLookupException):
    """Raised when the GitHub GraphQL rate limit is hit."""
    def __init__(self, reset_at: str, message: str = "GitHub API rate limit exceeded."):
        self.reset_at = reset_at
        super().__init__(f"{message} Resets at: {reset_at}")

class UnknownCategoryException(ConfiguratorException):
    """Raised when selecting a category id that the current repository does not have."""
    def __init__(self, category_id: str):
        self.category_id = category_id
        super().__init__(f"Unknown discussion category: {category_id}")

class InvalidMappingException(ConfiguratorException):
    """Raised when an unknown page to discussion mapping is chosen."""
    pass
