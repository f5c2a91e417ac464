from typing import Optional


class ConfigurationError(Exception):
    """
    Exception raised when the settings are missing, malformed, or inconsistent.

    This is raised before any traversal begins and is fatal to the run.

    Attributes:
        source (Optional[str]): The configuration file the problem was found in, if any.

    Example:
        >>> error = ConfigurationError("IncludeExtensions is required", source="appsettings.json")
        >>> str(error)
        'appsettings.json: IncludeExtensions is required'
    """

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        """
        Initialize the exception with a message and the offending source.

        Args:
            message (str): Description of the configuration problem.
            source (str, optional): Path of the configuration file. Defaults to None.
        """
        self.source = source
        super().__init__(f"{source}: {message}" if source else message)


class RootNotFoundError(FileNotFoundError):
    """
    Exception raised when the directory to render does not exist.

    Subclasses FileNotFoundError so callers that only care about missing paths can
    catch the builtin.

    Attributes:
        root_path (str): The path that could not be found.

    Example:
        >>> error = RootNotFoundError("/no/such/dir")
        >>> str(error)
        'The specified directory does not exist: /no/such/dir'
    """

    def __init__(self, root_path: str) -> None:
        self.root_path = root_path
        super().__init__(f"The specified directory does not exist: {root_path}")