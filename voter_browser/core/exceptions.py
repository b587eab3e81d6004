class VoterBrowserError(Exception):
    """Base exception for all voter_browser errors"""
    pass

class ConfigError(VoterBrowserError):
    """Invalid or inconsistent global.json or environment override"""
    pass

class ParseError(VoterBrowserError):
    """Delimited voter text could not be turned into a dataset"""
    pass

class NoValidRecordsError(ParseError):
    """
    Import produced zero rows carrying both voter_id and name.
    The previously loaded dataset is left untouched.
    """

    def __init__(self, message: str = "No valid voter records found", dropped: int = 0):
        self.dropped = dropped
        super().__init__(message)

class UnknownCriteriaFieldError(VoterBrowserError, ValueError):
    """update_criteria was called with a field FilterState does not have"""
    pass

class UnknownReportTypeError(VoterBrowserError, ValueError):
    """Report type is not one of the known report layouts"""
    pass
