class FaultDemoError(Exception):
    """
    Base exception for all fault demo errors.
    """
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class InvalidScenarioError(FaultDemoError, ValueError):
    def __init__(self, message: str = "Scenario name must be a non-empty string."):
        super().__init__(message)

class ConfigurationError(FaultDemoError):
    def __init__(self, message: str = "Invalid fault demo configuration."):
        super().__init__(message)

class DatabaseUnavailableError(FaultDemoError, ConnectionError):
    """
    Raised when a database endpoint cannot be reached.
    The driver or network error is chained as __cause__.
    """
    def __init__(self, message: str = "Cannot connect to the database."):
        super().__init__(message)

class UnknownTypeError(FaultDemoError, ImportError):
    """
    Raised when a dotted type name resolves to a module that has no such attribute.
    """
    def __init__(self, message: str = "Type could not be resolved."):
        super().__init__(message)
